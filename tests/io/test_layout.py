"""Tests for grid_pursuit.io.layout text boards."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_pursuit.domain.grid import Grid
from grid_pursuit.io.layout import dump_layout, load_layout, parse_layout

BOARD = """\
..........
..........
........X.
......|...
......|...
......|...
......|...
..........
.@........
..........
"""


class TestParseLayout:
    def test_reference_board(self) -> None:
        layout = parse_layout(BOARD)
        assert (layout.grid.width, layout.grid.height) == (10, 10)
        assert layout.start == (1, 8)
        assert layout.target == (8, 2)
        assert layout.grid.blocked_cells() == [(6, y) for y in range(3, 7)]

    def test_hash_is_blocked_too(self) -> None:
        layout = parse_layout("@#\n.X\n")
        assert layout.grid.is_blocked(1, 0)

    def test_markers_sit_on_open_cells(self) -> None:
        layout = parse_layout(BOARD)
        assert not layout.grid.is_blocked(*layout.start)
        assert not layout.grid.is_blocked(*layout.target)

    def test_ignores_surrounding_blank_lines(self) -> None:
        layout = parse_layout("\n\n@.\n.X\n\n")
        assert (layout.grid.width, layout.grid.height) == (2, 2)

    def test_accepts_crlf(self) -> None:
        layout = parse_layout("@.\r\n.X\r\n")
        assert layout.target == (1, 1)

    @pytest.mark.parametrize(
        "text, match",
        [
            ("", "empty"),
            ("@..\n.X\n", "same length"),
            ("@.\n.Z\n", "unknown layout character"),
            ("@@\n.X\n", "duplicate agent"),
            ("@X\nX.\n", "duplicate target"),
            ("..\n.X\n", "no agent"),
            ("@.\n..\n", "no target"),
            ("@*\n..\n", "duplicate agent or target"),
            ("*X\n..\n", "duplicate target"),
        ],
    )
    def test_rejects_malformed(self, text: str, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            parse_layout(text)


class TestDumpLayout:
    def test_roundtrip_reference_board(self) -> None:
        layout = parse_layout(BOARD)
        assert dump_layout(layout.grid, layout.start, layout.target) == BOARD

    def test_agent_on_target_uses_arrived_marker(self) -> None:
        text = dump_layout(Grid.create(2, 1), (0, 0), (0, 0))
        assert text == "*.\n"

    def test_roundtrip_agent_on_target(self) -> None:
        grid = Grid.from_blocked(4, 3, [(1, 1)])
        layout = parse_layout(dump_layout(grid, (3, 2), (3, 2)))
        assert layout.start == layout.target == (3, 2)
        assert layout.grid.blocked_cells() == [(1, 1)]

    def test_blocked_dumped_with_first_blocked_char(self) -> None:
        grid = Grid.from_blocked(3, 1, [(1, 0)])
        assert dump_layout(grid, (0, 0), (2, 0)) == "@|X\n"


def test_load_layout_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "board.txt"
    path.write_text(BOARD)
    assert load_layout(path).start == (1, 8)


def test_load_layout_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_layout(tmp_path / "missing.txt")
