# src/tetris_heckler/game/rendering/projection.py
from __future__ import annotations

from typing import Optional

from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.rotation import landing_y
from tetris_heckler.game.core.types import Position


def ghost_position(game: TetrisGame) -> Optional[Position]:
    """
    Where the active piece would land on a hard drop (render-only; reads the engine).
    """
    ap = game.active
    if ap is None:
        return None
    y = landing_y(board=game.board, shape=ap.shape, px=ap.pos.x, py=ap.pos.y)
    return Position(ap.pos.x, y)


__all__ = ["ghost_position"]
