# src/tetris_heckler/config/root.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator

from tetris_heckler.config.base import ConfigBase

PieceRuleName = Literal["uniform"]


class GameConfig(ConfigBase):
    """
    Engine-facing settings.

    seed=None draws from OS entropy; a fixed seed only makes a single session repeatable.
    """

    seed: Optional[int] = Field(default=None, ge=0)
    piece_rule: PieceRuleName = "uniform"

    @field_validator("piece_rule", mode="before")
    @classmethod
    def _piece_rule_lower(cls, v: object) -> str:
        return str(v).strip().lower()


class CommentaryConfig(ConfigBase):
    enabled: bool = True
    model: str = "gemini-3-flash-preview"
    api_key_env: str = "API_KEY"
    temperature: float = Field(default=0.8, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=50, gt=0)
    interval_s: float = Field(default=30.0, ge=0.0)


class UIConfig(ConfigBase):
    cell: int = Field(default=30, gt=0)
    fps: int = Field(default=60, gt=0)
    show_grid: bool = False
    ghost: bool = True
    key_repeat: bool = True


class PersistenceConfig(ConfigBase):
    save_path: str = "tetris_save.json"
    highscore_path: str = "tetris_highscore.json"


class AppConfig(ConfigBase):
    game: GameConfig = Field(default_factory=GameConfig)
    commentary: CommentaryConfig = Field(default_factory=CommentaryConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)


__all__ = ["AppConfig", "CommentaryConfig", "GameConfig", "PersistenceConfig", "PieceRuleName", "UIConfig"]
