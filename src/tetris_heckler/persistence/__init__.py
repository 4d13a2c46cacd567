# src/tetris_heckler/persistence/__init__.py
from __future__ import annotations

from tetris_heckler.persistence.highscore import HighScoreStore
from tetris_heckler.persistence.savegame import load_game, save_game

__all__ = ["HighScoreStore", "load_game", "save_game"]
