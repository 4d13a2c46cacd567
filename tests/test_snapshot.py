# tests/test_snapshot.py
from __future__ import annotations

from tetris_heckler.game.core.board import Board
from tetris_heckler.game.core.snapshot import board_snapshot


def test_board_snapshot_marks_filled_cells() -> None:
    b = Board.empty()
    b.grid[19, 0] = 3
    b.grid[19, 9] = 7
    lines = board_snapshot(b.grid).split("\n")
    assert len(lines) == 20
    assert all(len(row) == 10 for row in lines)
    assert lines[0] == ".........."
    assert lines[19] == "X........X"


def test_board_snapshot_ignores_active_piece(o_game) -> None:
    assert set(o_game.board_snapshot()) <= {".", "\n"}
