# src/tetris_heckler/runtime/drop_timer.py
from __future__ import annotations

from dataclasses import dataclass

from tetris_heckler.game.core.rules import drop_interval_ms


@dataclass
class DropTimer:
    """
    Gravity cadence for the driving loop.

    Elapsed frame time accumulates; once it exceeds the level's drop interval the
    caller should perform one `move(0, 1)`. The accumulator then restarts from zero
    (leftover time is discarded).
    """

    accumulated_ms: float = 0.0

    def reset(self) -> None:
        self.accumulated_ms = 0.0

    def advance(self, elapsed_ms: float, *, level: int) -> bool:
        self.accumulated_ms += float(elapsed_ms)
        if self.accumulated_ms > drop_interval_ms(level):
            self.accumulated_ms = 0.0
            return True
        return False


__all__ = ["DropTimer"]
