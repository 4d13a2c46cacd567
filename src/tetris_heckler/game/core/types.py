# src/tetris_heckler/game/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Shape = Tuple[Tuple[int, ...], ...]
Color = Tuple[int, int, int]
Grid = Tuple[Tuple[int, ...], ...]


class PieceKind(str, Enum):
    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


class GameStatus(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class Position:
    x: int
    y: int


@dataclass(frozen=True)
class Tetromino:
    """
    Active piece value.

    pos is the top-left corner of the shape's bounding box on the board.
    color is carried for rendering only; game logic never reads it.
    """

    kind: PieceKind
    shape: Shape
    pos: Position
    color: Color

    @property
    def width(self) -> int:
        return len(self.shape[0]) if self.shape else 0

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> list[tuple[int, int]]:
        """
        Board coordinates (x, y) of every occupied cell.
        """
        out: list[tuple[int, int]] = []
        for yy, row in enumerate(self.shape):
            for xx, v in enumerate(row):
                if v != 0:
                    out.append((self.pos.x + xx, self.pos.y + yy))
        return out


@dataclass(frozen=True)
class GameState:
    """
    Serializable engine snapshot.

    grid is a copy (rows of ints), never a view into the live board.
    """

    grid: Grid
    active_piece: Optional[Tetromino]
    next_piece_kind: PieceKind
    score: int
    lines: int
    level: int
    status: GameStatus


__all__ = ["Color", "GameState", "GameStatus", "Grid", "PieceKind", "Position", "Shape", "Tetromino"]
