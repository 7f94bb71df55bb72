"""Tests for grid_pursuit.domain.geometry."""

from __future__ import annotations

import math

import pytest

from grid_pursuit.domain.geometry import (
    DIRECTIONS,
    NUM_DIRECTIONS,
    chebyshev,
    clamp_to_unit,
    direction_to,
    euclidean,
    offset,
)


class TestDirections:
    def test_fixed_order(self) -> None:
        assert DIRECTIONS == (
            (0, 1),
            (1, 1),
            (1, 0),
            (1, -1),
            (0, -1),
            (-1, -1),
            (-1, 0),
            (-1, 1),
        )
        assert NUM_DIRECTIONS == 8

    def test_all_unit_and_distinct(self) -> None:
        assert len(set(DIRECTIONS)) == 8
        for dx, dy in DIRECTIONS:
            assert max(abs(dx), abs(dy)) == 1


class TestClampToUnit:
    @pytest.mark.parametrize(
        "delta, expected",
        [
            ((7, -7), (1, -1)),
            ((0, 3), (0, 1)),
            ((-2, 0), (-1, 0)),
            ((0, 0), (0, 0)),
            ((5, -1), (1, -1)),
        ],
    )
    def test_each_axis_clamped_independently(
        self, delta: tuple[int, int], expected: tuple[int, int]
    ) -> None:
        assert clamp_to_unit(delta) == expected

    def test_direction_to(self) -> None:
        assert direction_to((8, 1), (1, 8)) == (1, -1)
        assert direction_to((4, 4), (4, 4)) == (0, 0)


def test_offset_scales_direction() -> None:
    assert offset((1, 8), (1, 0), 5) == (6, 8)
    assert offset((1, 8), (0, -1)) == (1, 7)


class TestDistances:
    def test_euclidean(self) -> None:
        assert euclidean((0, 0), (3, 4)) == 5.0
        assert euclidean((6, 8), (8, 1)) == math.sqrt(53)

    def test_euclidean_symmetric_in_axes(self) -> None:
        # (6, 8) and (1, 3) are mirror images around the diagonal to (8, 1).
        assert euclidean((6, 8), (8, 1)) == euclidean((1, 3), (8, 1))

    def test_chebyshev(self) -> None:
        assert chebyshev((5, 5), (7, 4)) == 2
        assert chebyshev((1, 1), (1, 1)) == 0
