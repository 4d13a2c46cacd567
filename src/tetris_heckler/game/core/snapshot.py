# src/tetris_heckler/game/core/snapshot.py
from __future__ import annotations

from typing import Any

import numpy as np

FILLED_CHAR = "X"
EMPTY_CHAR = "."


def board_snapshot(grid: Any) -> str:
    """
    Compact occupancy text: one line per row, 'X' for any locked cell, '.' otherwise.
    Kind ids are not preserved.
    """
    arr = np.asarray(grid)
    return "\n".join("".join(FILLED_CHAR if int(v) != 0 else EMPTY_CHAR for v in row) for row in arr)


__all__ = ["EMPTY_CHAR", "FILLED_CHAR", "board_snapshot"]
