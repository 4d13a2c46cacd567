# src/tetris_heckler/persistence/savegame.py
from __future__ import annotations

import json
import logging
from pathlib import Path

from tetris_heckler.game.core.state_codec import StateError, state_from_dict, state_to_dict
from tetris_heckler.game.core.types import GameState
from tetris_heckler.utils.file_io import read_json, write_json

logger = logging.getLogger(__name__)


def save_game(path: Path, state: GameState) -> None:
    p = Path(path)
    write_json(p, state_to_dict(state))
    logger.info("game saved to %s (score=%d)", p, state.score)


def load_game(path: Path) -> GameState:
    """
    Read a saved game. Any problem (missing file, bad JSON, bad schema) is a StateError.
    """
    p = Path(path)
    try:
        data = read_json(p)
    except (OSError, json.JSONDecodeError) as e:
        raise StateError(f"could not read save file {p}: {e}") from e
    if data is None:
        raise StateError(f"save file not found: {p}")
    return state_from_dict(data)


__all__ = ["load_game", "save_game"]
