# src/tetris_heckler/game/core/__init__.py
from __future__ import annotations

from tetris_heckler.game.core.events import EventQueue, GameEvent, GameOver, LineClear, Tetris
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.state_codec import StateError
from tetris_heckler.game.core.types import GameState, GameStatus, PieceKind, Position, Tetromino

__all__ = [
    "EventQueue",
    "GameEvent",
    "GameOver",
    "GameState",
    "GameStatus",
    "LineClear",
    "PieceKind",
    "Position",
    "StateError",
    "Tetris",
    "Tetromino",
    "TetrisGame",
]
