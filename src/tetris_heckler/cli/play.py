# src/tetris_heckler/cli/play.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from tetris_heckler.commentary.client import CommentaryClient
from tetris_heckler.commentary.director import CommentaryDirector
from tetris_heckler.config.io import load_app_config, to_plain_dict
from tetris_heckler.config.root import AppConfig
from tetris_heckler.game.core.events import EventQueue
from tetris_heckler.game.core.state_codec import StateError
from tetris_heckler.game.factory import make_game_from_cfg
from tetris_heckler.persistence.highscore import HighScoreStore
from tetris_heckler.persistence.savegame import load_game
from tetris_heckler.runtime.session import PlaySession
from tetris_heckler.utils.logging import setup_logger


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play Tetris with an AI heckler (pygame).")
    ap.add_argument("--config", type=str, default=None, help="YAML config (defaults built in)")
    ap.add_argument("--seed", type=int, default=None, help="override game.seed")
    ap.add_argument("--cell", type=int, default=None, help="override ui.cell (pixels per block)")
    ap.add_argument("--fps", type=int, default=None, help="override ui.fps")
    ap.add_argument("--show-grid", action="store_true")
    ap.add_argument("--no-ai", action="store_true", help="disable commentary requests")
    ap.add_argument("--load", type=str, default=None, help="start from a saved game (paused)")
    ap.add_argument("--log-level", type=str, default="info")
    ap.add_argument("overrides", nargs="*", help="dotlist overrides, e.g. commentary.interval_s=10")
    return ap.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    overrides = list(args.overrides or [])
    if args.seed is not None:
        overrides.append(f"game.seed={int(args.seed)}")
    if args.cell is not None:
        overrides.append(f"ui.cell={int(args.cell)}")
    if args.fps is not None:
        overrides.append(f"ui.fps={int(args.fps)}")
    if args.show_grid:
        overrides.append("ui.show_grid=true")
    if args.no_ai:
        overrides.append("commentary.enabled=false")
    cfg_path = Path(args.config) if args.config else None
    return load_app_config(cfg_path, overrides=overrides)


def build_session(cfg: AppConfig) -> PlaySession:
    events = EventQueue()
    game = make_game_from_cfg(cfg.game, event_sink=events)

    director: Optional[CommentaryDirector] = None
    if cfg.commentary.enabled:
        director = CommentaryDirector(
            client=CommentaryClient.from_config(cfg.commentary),
            interval_s=cfg.commentary.interval_s,
        )

    return PlaySession(
        game=game,
        events=events,
        director=director,
        highscores=HighScoreStore(Path(cfg.persistence.highscore_path)),
        save_path=Path(cfg.persistence.save_path),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    log = setup_logger(name="tetris_heckler", use_rich=True, level=str(args.log_level))

    cfg = build_config(args)
    log.debug("effective config: %s", to_plain_dict(cfg))
    session = build_session(cfg)

    if args.load:
        try:
            session.game.restore_state(load_game(Path(args.load)))
        except StateError as e:
            log.error("could not load %s: %s", args.load, e)
            return 2
        log.info("loaded %s (paused, press P to resume)", args.load)

    if session.director is None:
        log.info("commentary disabled")
    elif not session.director.client.available:
        log.warning("no API key in $%s: heckler will use fallback lines", cfg.commentary.api_key_env)

    # pygame is only needed for the interactive loop
    from tetris_heckler.game.rendering.pygame.app import run_play

    return run_play(session=session, ui=cfg.ui)


if __name__ == "__main__":
    raise SystemExit(main())
