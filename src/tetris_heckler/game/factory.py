# src/tetris_heckler/game/factory.py
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from tetris_heckler.config.root import GameConfig
from tetris_heckler.game.core.events import EventSink
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.piece_rules import make_piece_rule


def make_game_from_cfg(cfg: GameConfig | dict[str, Any] | None = None, *, event_sink: Optional[EventSink] = None) -> TetrisGame:
    """
    Build an engine from GameConfig (or a plain mapping validated into one).
    """
    if cfg is None:
        game_cfg = GameConfig()
    elif isinstance(cfg, GameConfig):
        game_cfg = cfg
    elif isinstance(cfg, dict):
        game_cfg = GameConfig.model_validate(cfg)
    else:
        raise TypeError(f"cfg must be GameConfig|mapping|None, got {type(cfg)!r}")

    rng = np.random.default_rng(game_cfg.seed)
    return TetrisGame(
        event_sink=event_sink,
        piece_rule=make_piece_rule(game_cfg.piece_rule),
        rng=rng,
    )


__all__ = ["make_game_from_cfg"]
