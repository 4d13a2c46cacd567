# src/tetris_heckler/game/core/constants.py
from __future__ import annotations

# Board / cell encoding
ROWS: int = 20
COLS: int = 10
EMPTY_CELL: int = 0

# Canonical kind order; board id = index + 1
KIND_ORDER: tuple[str, ...] = ("I", "J", "L", "O", "S", "T", "Z")

# Horizontal offsets tried in order when rotating (same for every kind/orientation)
ROTATION_KICKS: tuple[int, ...] = (0, -1, 1, -2, 2)

# Points per simultaneous clear, indexed by min(cleared, 4), multiplied by level
LINE_CLEAR_POINTS: tuple[int, ...] = (0, 40, 100, 300, 1200)
HARD_DROP_POINTS_PER_CELL: int = 2
LINES_PER_LEVEL: int = 10

# Gravity cadence (ms) for the external drop timer
BASE_DROP_INTERVAL_MS: int = 1000
DROP_INTERVAL_STEP_MS: int = 100
MIN_DROP_INTERVAL_MS: int = 100
