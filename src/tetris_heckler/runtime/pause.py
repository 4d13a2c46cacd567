# src/tetris_heckler/runtime/pause.py
from __future__ import annotations

from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.types import GameStatus


def toggle_pause(game: TetrisGame) -> GameStatus:
    """
    Flip PLAYING <-> PAUSED. IDLE and GAME_OVER are left alone.
    """
    if game.status == GameStatus.PLAYING:
        game.status = GameStatus.PAUSED
    elif game.status == GameStatus.PAUSED:
        game.status = GameStatus.PLAYING
    return game.status


__all__ = ["toggle_pause"]
