from grid_pursuit.config.constants import (
    AGENT_CHAR,
    ARRIVED_CHAR,
    BLOCKED_CHARS,
    DEFAULT_START,
    DEFAULT_TARGET,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_STEPS,
    OBSTACLE_DENSITY,
    OBSTACLE_PENALTY_EXPONENT,
    OPEN_CHAR,
    OSCILLATION_HISTORY,
    OSCILLATION_MAX_PERIOD,
    SEARCH_RADIUS,
    STALL_WINDOW,
    TARGET_CHAR,
)


def test_grid_dimensions_are_positive_ints() -> None:
    assert isinstance(GRID_WIDTH, int) and GRID_WIDTH > 0
    assert isinstance(GRID_HEIGHT, int) and GRID_HEIGHT > 0


def test_reference_radius_is_five() -> None:
    assert SEARCH_RADIUS == 5


def test_default_start_and_target_inside_grid() -> None:
    for x, y in (DEFAULT_START, DEFAULT_TARGET):
        assert 0 <= x < GRID_WIDTH
        assert 0 <= y < GRID_HEIGHT
    assert DEFAULT_START != DEFAULT_TARGET


def test_stall_window_less_than_num_steps() -> None:
    assert isinstance(STALL_WINDOW, int) and STALL_WINDOW > 0
    assert STALL_WINDOW < NUM_STEPS


def test_oscillation_history_holds_two_periods() -> None:
    assert OSCILLATION_MAX_PERIOD >= 2
    assert OSCILLATION_HISTORY >= 2 * OSCILLATION_MAX_PERIOD


def test_obstacle_penalty_exponent() -> None:
    assert OBSTACLE_PENALTY_EXPONENT == 1.5


def test_obstacle_density_is_a_fraction() -> None:
    assert 0.0 <= OBSTACLE_DENSITY < 1.0


def test_layout_characters_are_distinct() -> None:
    chars = [OPEN_CHAR, AGENT_CHAR, TARGET_CHAR, ARRIVED_CHAR, *BLOCKED_CHARS]
    assert len(chars) == len(set(chars))
    assert all(len(c) == 1 for c in chars)


def test_flush_threshold_is_power_of_two_or_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024
