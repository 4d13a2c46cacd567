# src/tetris_heckler/game/core/rotation.py
from __future__ import annotations

from typing import Optional

from tetris_heckler.game.core.board import Board
from tetris_heckler.game.core.constants import EMPTY_CELL, ROTATION_KICKS
from tetris_heckler.game.core.types import Shape


def collides(*, board: Board, shape: Shape, px: int, py: int) -> bool:
    """
    True if any occupied cell of shape at (px, py) leaves the side/bottom bounds or
    overlaps a locked cell. Cells above the board (y < 0) only check the side bounds.
    """
    for yy, row in enumerate(shape):
        for xx, v in enumerate(row):
            if v == 0:
                continue
            x = px + xx
            y = py + yy
            if x < 0 or x >= board.w or y >= board.h:
                return True
            if y >= 0 and board.grid[y, x] != EMPTY_CELL:
                return True
    return False


def rotate_cw(shape: Shape) -> Shape:
    # transpose, then reverse each row
    return tuple(tuple(col) for col in zip(*shape[::-1]))


def try_rotate(*, board: Board, shape: Shape, px: int, py: int) -> Optional[tuple[Shape, int]]:
    """
    Clockwise rotation with a fixed horizontal kick sequence (no vertical kicks).

    Returns (rotated_shape, new_x) for the first free placement, or None.
    """
    rotated = rotate_cw(shape)
    for kick in ROTATION_KICKS:
        if not collides(board=board, shape=rotated, px=px + kick, py=py):
            return rotated, px + kick
    return None


def landing_y(*, board: Board, shape: Shape, px: int, py: int) -> int:
    """
    Lowest y reachable by straight downward moves from (px, py).
    """
    y = py
    while not collides(board=board, shape=shape, px=px, py=y + 1):
        y += 1
    return y
