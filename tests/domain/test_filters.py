import pytest

from grid_pursuit.domain.filters import OscillationDetector, StallDetector, TerminationReason


def test_stall_detector_triggers_after_exact_window() -> None:
    detector = StallDetector(window=3)

    assert detector.observe((2, 2)) is False
    assert detector.observe((2, 2)) is False
    assert detector.observe((2, 2)) is False
    assert detector.observe((2, 2)) is True


def test_stall_detector_resets_after_move() -> None:
    detector = StallDetector(window=2)

    assert detector.observe((0, 0)) is False
    assert detector.observe((0, 0)) is False
    assert detector.observe((0, 1)) is False
    assert detector.observe((0, 1)) is False
    assert detector.observe((0, 1)) is True


def test_stall_detector_window_one() -> None:
    detector = StallDetector(window=1)

    assert detector.observe((4, 4)) is False
    assert detector.observe((4, 4)) is True


def test_stall_detector_rejects_zero_window() -> None:
    with pytest.raises(ValueError):
        StallDetector(window=0)


def test_oscillation_detector_detects_two_cycle() -> None:
    detector = OscillationDetector(max_period=2, history_size=4)
    a, b = (3, 3), (4, 3)

    assert detector.observe(a) is False
    assert detector.observe(b) is False
    assert detector.observe(a) is False
    assert detector.observe(b) is True


def test_oscillation_detector_detects_three_cycle() -> None:
    detector = OscillationDetector(max_period=3, history_size=6)
    cycle = [(1, 1), (2, 1), (2, 2)]

    observed = [detector.observe(cell) for cell in cycle * 2]
    assert observed == [False, False, False, False, False, True]


def test_oscillation_detector_ignores_standing_still() -> None:
    detector = OscillationDetector(max_period=2, history_size=4)
    assert not any(detector.observe((5, 5)) for _ in range(8))


def test_oscillation_detector_ignores_straight_walk() -> None:
    detector = OscillationDetector(max_period=4, history_size=16)
    assert not any(detector.observe((x, 0)) for x in range(10))


def test_oscillation_detector_rejects_short_history() -> None:
    with pytest.raises(ValueError, match="history_size"):
        OscillationDetector(max_period=3, history_size=5)
    with pytest.raises(ValueError, match="max_period"):
        OscillationDetector(max_period=1, history_size=4)


def test_termination_reason_values() -> None:
    assert [reason.value for reason in TerminationReason] == ["arrived", "stalled", "oscillating"]
