# src/tetris_heckler/config/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel

from tetris_heckler.config.root import AppConfig


def _strip_hydra_key(data: dict[str, Any]) -> dict[str, Any]:
    out = dict(data)
    out.pop("hydra", None)
    return out


def to_plain_dict(cfg: Any) -> dict[str, Any]:
    if isinstance(cfg, BaseModel):
        return cfg.model_dump(mode="json")
    if isinstance(cfg, DictConfig):
        data = OmegaConf.to_container(cfg, resolve=True)
        if not isinstance(data, dict):
            raise TypeError("config must resolve to a mapping")
        return _strip_hydra_key(data)
    raise TypeError(f"unsupported config type: {type(cfg).__name__}")


def load_yaml(path: Path) -> dict[str, Any]:
    cfg_path = Path(path)
    cfg = OmegaConf.load(cfg_path)
    data = OmegaConf.to_container(cfg, resolve=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping")
    return _strip_hydra_key(data)


def load_app_config(path: Optional[Path] = None, *, overrides: Optional[list[str]] = None) -> AppConfig:
    """
    Load AppConfig from YAML (or defaults when path is None), then apply dotlist
    overrides such as ["game.seed=3", "commentary.enabled=false"].
    """
    base = OmegaConf.create(load_yaml(path) if path is not None else {})
    if overrides:
        base = OmegaConf.merge(base, OmegaConf.from_dotlist(list(overrides)))
    data = OmegaConf.to_container(base, resolve=True)
    if not isinstance(data, dict):
        raise TypeError("config must resolve to a mapping")
    return AppConfig.model_validate(_strip_hydra_key(data))


__all__ = ["load_app_config", "load_yaml", "to_plain_dict"]
