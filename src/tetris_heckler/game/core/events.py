# src/tetris_heckler/game/core/events.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, ClassVar, Deque, List, Union


@dataclass(frozen=True)
class GameOver:
    name: ClassVar[str] = "GAME_OVER"


@dataclass(frozen=True)
class Tetris:
    name: ClassVar[str] = "TETRIS"


@dataclass(frozen=True)
class LineClear:
    count: int
    name: ClassVar[str] = "LINE_CLEAR"


GameEvent = Union[GameOver, Tetris, LineClear]
EventSink = Callable[[GameEvent], None]


class EventQueue:
    """
    Collects engine events for a driver that prefers to poll once per frame.

    Instances are callable, so they can be passed directly as the engine's sink.
    """

    def __init__(self) -> None:
        self._q: Deque[GameEvent] = deque()

    def __call__(self, event: GameEvent) -> None:
        self._q.append(event)

    def __len__(self) -> int:
        return len(self._q)

    def drain(self) -> List[GameEvent]:
        out = list(self._q)
        self._q.clear()
        return out


def null_sink(event: GameEvent) -> None:
    _ = event


__all__ = ["EventQueue", "EventSink", "GameEvent", "GameOver", "LineClear", "Tetris", "null_sink"]
