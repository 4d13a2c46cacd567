# tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tetris_heckler.cli.play import build_config, build_session, parse_args
from tetris_heckler.config.io import load_app_config, to_plain_dict
from tetris_heckler.config.root import AppConfig, GameConfig
from tetris_heckler.game.factory import make_game_from_cfg

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_defaults_match_shipped_yaml() -> None:
    from_yaml = load_app_config(REPO_ROOT / "configs" / "default.yaml")
    assert from_yaml == AppConfig()
    assert from_yaml.commentary.interval_s == 30.0
    assert from_yaml.commentary.api_key_env == "API_KEY"


def test_dotlist_overrides_apply() -> None:
    cfg = load_app_config(overrides=["game.seed=3", "commentary.enabled=false", "ui.fps=30"])
    assert cfg.game.seed == 3
    assert cfg.commentary.enabled is False
    assert cfg.ui.fps == 30


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text("game:\n  seed: 1\n  gravity: 9.8\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_app_config(p)


def test_game_config_validates_values() -> None:
    assert GameConfig(piece_rule="UNIFORM").piece_rule == "uniform"
    with pytest.raises(ValidationError):
        GameConfig(piece_rule="bag7")
    with pytest.raises(ValidationError):
        GameConfig(seed=-1)


def test_seeded_factory_is_reproducible() -> None:
    def kinds(seed: int) -> list[str]:
        g = make_game_from_cfg({"seed": seed})
        out = []
        g.start()
        for _ in range(20):
            out.append(g.next_kind.value)
            g.hard_drop()
        return out

    assert kinds(7) == kinds(7)


def test_cli_flags_become_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    args = parse_args(["--seed", "4", "--no-ai", "--show-grid", "ui.cell=24"])
    cfg = build_config(args)
    assert cfg.game.seed == 4
    assert cfg.ui.cell == 24
    assert cfg.ui.show_grid is True
    assert cfg.commentary.enabled is False

    session = build_session(cfg)
    assert session.director is None
    assert session.best_score() == 0
    assert session.save_path == Path("tetris_save.json")


def test_to_plain_dict_dumps_json_friendly_mapping() -> None:
    data = to_plain_dict(load_app_config(overrides=["game.seed=9"]))
    assert data["game"] == {"seed": 9, "piece_rule": "uniform"}
    assert data["persistence"]["save_path"] == "tetris_save.json"
