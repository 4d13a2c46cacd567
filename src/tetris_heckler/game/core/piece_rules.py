# src/tetris_heckler/game/core/piece_rules.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from tetris_heckler.game.core.types import PieceKind


class PieceRule(ABC):
    """
    Piece selection rule interface.

    Lifecycle:
      - reset(rng=..., kinds=...) is called once when the engine is built
      - next_piece() is called whenever the engine needs a new preview piece
    """

    @abstractmethod
    def reset(self, *, rng: np.random.Generator, kinds: Sequence[PieceKind]) -> None:
        raise NotImplementedError

    @abstractmethod
    def next_piece(self) -> PieceKind:
        raise NotImplementedError


@dataclass
class UniformPieceRule(PieceRule):
    """
    Independent uniform draw over the available kinds.

    No bag and no anti-repeat: the same kind may come up any number of times in a row.
    """

    _rng: np.random.Generator | None = None
    _kinds: tuple[PieceKind, ...] = ()

    def reset(self, *, rng: np.random.Generator, kinds: Sequence[PieceKind]) -> None:
        self._rng = rng
        self._kinds = tuple(PieceKind(k) for k in kinds)
        if not self._kinds:
            raise ValueError("UniformPieceRule requires non-empty kinds")

    def next_piece(self) -> PieceKind:
        if self._rng is None or not self._kinds:
            raise RuntimeError("UniformPieceRule.reset() must be called before next_piece()")
        i = int(self._rng.integers(0, len(self._kinds)))
        return self._kinds[i]


def make_piece_rule(name: str) -> PieceRule:
    n = str(name).strip().lower()
    if n == "uniform":
        return UniformPieceRule()
    raise ValueError(f"unknown piece_rule={name!r} (expected 'uniform')")


__all__ = ["PieceRule", "UniformPieceRule", "make_piece_rule"]
