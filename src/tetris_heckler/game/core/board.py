# src/tetris_heckler/game/core/board.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from tetris_heckler.game.core.constants import COLS, EMPTY_CELL, KIND_ORDER, ROWS
from tetris_heckler.game.core.types import Grid


@dataclass
class Board:
    h: int
    w: int
    grid: np.ndarray  # locked blocks only (0=empty, 1..7 board ids)

    @classmethod
    def empty(cls, *, h: int = ROWS, w: int = COLS) -> "Board":
        return cls(h=h, w=w, grid=np.zeros((h, w), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], *, h: int = ROWS, w: int = COLS) -> "Board":
        """
        Build a board from nested rows, rejecting wrong dimensions or out-of-range ids.
        """
        if len(rows) != h:
            raise ValueError(f"grid must have {h} rows, got {len(rows)}")
        for y, row in enumerate(rows):
            if len(row) != w:
                raise ValueError(f"grid row {y} must have {w} cells, got {len(row)}")
        arr = np.asarray(rows, dtype=np.int64)
        if arr.size and (int(arr.min()) < EMPTY_CELL or int(arr.max()) > len(KIND_ORDER)):
            raise ValueError(f"grid cells must be in [0,{len(KIND_ORDER)}]")
        return cls(h=h, w=w, grid=arr.astype(np.uint8))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h

    def full_rows(self) -> np.ndarray:
        return np.all(self.grid != EMPTY_CELL, axis=1)

    def clear_full_lines(self) -> int:
        """
        Remove every full row and insert the same number of empty rows on top.

        Surviving rows keep their relative order, which matches a bottom-up scan that
        re-examines the same index after each removal.
        """
        full = self.full_rows()
        cleared = int(full.sum())
        if cleared <= 0:
            return 0
        kept = self.grid[~full]
        new_rows = np.zeros((cleared, self.w), dtype=np.uint8)
        self.grid = np.vstack([new_rows, kept])
        return cleared

    def to_rows(self) -> Grid:
        return tuple(tuple(int(v) for v in row) for row in self.grid.tolist())
