# src/tetris_heckler/game/core/rules.py
from __future__ import annotations

from dataclasses import dataclass

from tetris_heckler.game.core.constants import (
    BASE_DROP_INTERVAL_MS,
    DROP_INTERVAL_STEP_MS,
    LINE_CLEAR_POINTS,
    LINES_PER_LEVEL,
    MIN_DROP_INTERVAL_MS,
)


@dataclass(frozen=True)
class ScoreConfig:
    single: int = LINE_CLEAR_POINTS[1]
    double: int = LINE_CLEAR_POINTS[2]
    triple: int = LINE_CLEAR_POINTS[3]
    tetris: int = LINE_CLEAR_POINTS[4]


def score_for_clears(cleared: int, level: int, cfg: ScoreConfig = ScoreConfig()) -> int:
    """
    Points for clearing `cleared` rows at once, scaled by the level in effect before
    the clear. Anything >= 4 scores as a tetris.
    """
    if cleared == 1:
        base = cfg.single
    elif cleared == 2:
        base = cfg.double
    elif cleared == 3:
        base = cfg.triple
    elif cleared >= 4:
        base = cfg.tetris
    else:
        return 0
    return int(base) * int(level)


def level_for_lines(lines: int) -> int:
    return int(lines) // LINES_PER_LEVEL + 1


def drop_interval_ms(level: int) -> int:
    return max(MIN_DROP_INTERVAL_MS, BASE_DROP_INTERVAL_MS - (int(level) - 1) * DROP_INTERVAL_STEP_MS)


__all__ = ["ScoreConfig", "drop_interval_ms", "level_for_lines", "score_for_clears"]
