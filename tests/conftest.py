# tests/conftest.py
from __future__ import annotations

from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence

import numpy as np
import pytest

from tetris_heckler.game.core.events import EventQueue
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.piece_rules import PieceRule
from tetris_heckler.game.core.types import PieceKind


@dataclass
class FixedPieceRule(PieceRule):
    """Cycles through a fixed list of kinds (tests only)."""

    sequence: Sequence[str] = ("O",)
    _i: int = 0

    def reset(self, *, rng: np.random.Generator, kinds: Sequence[PieceKind]) -> None:
        self._i = 0

    def next_piece(self) -> PieceKind:
        k = PieceKind(self.sequence[self._i % len(self.sequence)])
        self._i += 1
        return k


class ImmediateExecutor(Executor):
    """Runs submitted work synchronously on the caller's thread."""

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        fut: Future = Future()
        try:
            fut.set_result(fn(*args, **kwargs))
        except Exception as e:
            fut.set_exception(e)
        return fut


@dataclass
class ManualExecutor(Executor):
    """Queues submitted work until run_all() is called."""

    pending: List[tuple[Callable[..., Any], tuple, dict, Future]] = field(default_factory=list)

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        fut: Future = Future()
        self.pending.append((fn, args, kwargs, fut))
        return fut

    def run_all(self) -> None:
        items, self.pending = self.pending, []
        for fn, args, kwargs, fut in items:
            fut.set_result(fn(*args, **kwargs))


def make_game(kinds: Sequence[str] = ("O",), *, events: EventQueue | None = None) -> TetrisGame:
    return TetrisGame(
        event_sink=events,
        piece_rule=FixedPieceRule(sequence=tuple(kinds)),
        rng=np.random.default_rng(0),
    )


@pytest.fixture
def events() -> EventQueue:
    return EventQueue()


@pytest.fixture
def o_game(events: EventQueue) -> TetrisGame:
    g = make_game(("O",), events=events)
    g.start()
    return g
