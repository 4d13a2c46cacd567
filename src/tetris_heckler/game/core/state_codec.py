# src/tetris_heckler/game/core/state_codec.py
from __future__ import annotations

import json
from typing import Annotated, Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from tetris_heckler.game.core.board import Board
from tetris_heckler.game.core.constants import COLS, KIND_ORDER, ROWS
from tetris_heckler.game.core.rotation import collides
from tetris_heckler.game.core.rules import level_for_lines
from tetris_heckler.game.core.types import GameState, GameStatus, PieceKind, Position, Tetromino

StrictCell = Annotated[int, Field(strict=True, ge=0, le=len(KIND_ORDER))]
StrictBit = Annotated[int, Field(strict=True, ge=0, le=1)]
StrictByte = Annotated[int, Field(strict=True, ge=0, le=255)]
StrictCoord = Annotated[int, Field(strict=True)]


class StateError(ValueError):
    """Saved game state is malformed; the engine was not modified."""


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class PositionModel(_Model):
    x: StrictCoord
    y: StrictCoord


class PieceModel(_Model):
    kind: PieceKind = Field(alias="type")
    shape: List[List[StrictBit]]
    pos: PositionModel
    color: Tuple[StrictByte, StrictByte, StrictByte]

    @field_validator("shape")
    @classmethod
    def _rectangular(cls, v: List[List[int]]) -> List[List[int]]:
        if not v or not v[0]:
            raise ValueError("shape must be a non-empty matrix")
        width = len(v[0])
        if any(len(row) != width for row in v):
            raise ValueError("shape rows must have equal width")
        if not any(c for row in v for c in row):
            raise ValueError("shape must have at least one filled cell")
        return v


class SavedState(_Model):
    """
    On-disk / on-wire schema of a GameState (camelCase keys).
    """

    grid: List[List[StrictCell]]
    active_piece: Optional[PieceModel] = Field(alias="activePiece")
    score: Annotated[int, Field(strict=True, ge=0)]
    lines: Annotated[int, Field(strict=True, ge=0)]
    level: Annotated[int, Field(strict=True, ge=1)]
    status: GameStatus
    next_piece_kind: PieceKind = Field(alias="nextPieceType")

    @model_validator(mode="after")
    def _consistent(self) -> "SavedState":
        if len(self.grid) != ROWS:
            raise ValueError(f"grid must have {ROWS} rows, got {len(self.grid)}")
        for y, row in enumerate(self.grid):
            if len(row) != COLS:
                raise ValueError(f"grid row {y} must have {COLS} cells, got {len(row)}")
        if self.level != level_for_lines(self.lines):
            raise ValueError(f"level {self.level} does not match {self.lines} cleared lines")
        return self


def _piece_to_dict(p: Optional[Tetromino]) -> Optional[dict[str, Any]]:
    if p is None:
        return None
    return {
        "type": PieceKind(p.kind).value,
        "shape": [[int(c) for c in row] for row in p.shape],
        "pos": {"x": int(p.pos.x), "y": int(p.pos.y)},
        "color": [int(c) for c in p.color],
    }


def state_to_dict(state: GameState) -> dict[str, Any]:
    return {
        "grid": [[int(c) for c in row] for row in state.grid],
        "activePiece": _piece_to_dict(state.active_piece),
        "score": int(state.score),
        "lines": int(state.lines),
        "level": int(state.level),
        "status": GameStatus(state.status).value,
        "nextPieceType": PieceKind(state.next_piece_kind).value,
    }


def _from_model(m: SavedState) -> GameState:
    piece: Optional[Tetromino] = None
    if m.active_piece is not None:
        ap = m.active_piece
        piece = Tetromino(
            kind=ap.kind,
            shape=tuple(tuple(row) for row in ap.shape),
            pos=Position(ap.pos.x, ap.pos.y),
            color=(ap.color[0], ap.color[1], ap.color[2]),
        )
    return GameState(
        grid=tuple(tuple(row) for row in m.grid),
        active_piece=piece,
        next_piece_kind=m.next_piece_kind,
        score=m.score,
        lines=m.lines,
        level=m.level,
        status=m.status,
    )


def state_from_dict(data: Mapping[str, Any]) -> GameState:
    if not isinstance(data, Mapping):
        raise StateError(f"saved state must be a mapping, got {type(data).__name__}")
    try:
        return _from_model(SavedState.model_validate(dict(data)))
    except ValidationError as e:
        raise StateError(f"invalid saved state: {e}") from e


def validate_state(state: GameState) -> None:
    """
    Raise StateError unless `state` could have been produced by a live engine and can
    resume play: the active piece must sit inside the board without overlapping locked cells.
    """
    try:
        data = state_to_dict(state)
    except (AttributeError, TypeError, ValueError) as e:
        raise StateError(f"invalid game state: {e}") from e
    checked = state_from_dict(data)

    ap = checked.active_piece
    if ap is None:
        return
    board = Board.from_rows(checked.grid, h=ROWS, w=COLS)
    if collides(board=board, shape=ap.shape, px=ap.pos.x, py=ap.pos.y):
        raise StateError(f"active piece at ({ap.pos.x}, {ap.pos.y}) is out of bounds or overlaps locked cells")


def dumps_state(state: GameState, *, indent: Optional[int] = None) -> str:
    return json.dumps(state_to_dict(state), indent=indent)


def loads_state(text: str) -> GameState:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StateError(f"saved state is not valid JSON: {e}") from e
    return state_from_dict(data)


__all__ = [
    "SavedState",
    "StateError",
    "dumps_state",
    "loads_state",
    "state_from_dict",
    "state_to_dict",
    "validate_state",
]
