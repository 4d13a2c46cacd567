# src/tetris_heckler/config/__init__.py
from __future__ import annotations

from tetris_heckler.config.io import load_app_config, load_yaml, to_plain_dict
from tetris_heckler.config.root import AppConfig, CommentaryConfig, GameConfig, PersistenceConfig, UIConfig

__all__ = [
    "AppConfig",
    "CommentaryConfig",
    "GameConfig",
    "PersistenceConfig",
    "UIConfig",
    "load_app_config",
    "load_yaml",
    "to_plain_dict",
]
