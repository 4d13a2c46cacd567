# tests/test_runtime.py
from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from conftest import ImmediateExecutor, make_game
from tetris_heckler.commentary.client import CommentaryClient
from tetris_heckler.commentary.director import CommentaryDirector
from tetris_heckler.game.core.events import EventQueue
from tetris_heckler.game.core.types import GameStatus, Position
from tetris_heckler.game.rendering.projection import ghost_position
from tetris_heckler.persistence.highscore import HighScoreStore
from tetris_heckler.runtime.drop_timer import DropTimer
from tetris_heckler.runtime.pause import toggle_pause
from tetris_heckler.runtime.session import PlaySession


def test_drop_timer_fires_after_interval_and_discards_leftover() -> None:
    t = DropTimer()
    assert not t.advance(600, level=1)
    assert not t.advance(400, level=1)
    assert t.advance(1, level=1)
    assert t.accumulated_ms == 0.0
    assert not t.advance(900, level=2)
    assert t.advance(1, level=2)


def test_drop_timer_floor_at_high_levels() -> None:
    t = DropTimer()
    assert not t.advance(100, level=30)
    assert t.advance(1, level=30)


def test_toggle_pause_only_flips_running_games() -> None:
    g = make_game()
    assert toggle_pause(g) == GameStatus.IDLE
    g.start()
    assert toggle_pause(g) == GameStatus.PAUSED
    assert toggle_pause(g) == GameStatus.PLAYING


def test_ghost_position_tracks_landing_spot() -> None:
    g = make_game()
    assert ghost_position(g) is None
    g.start()
    g.board.grid[10, 4] = 1
    assert ghost_position(g) == Position(4, 8)
    g.move(-2, 0)
    assert ghost_position(g) == Position(2, 18)


def _session(tmp_path: Path, *, with_director: bool = False) -> PlaySession:
    events = EventQueue()
    director = None
    if with_director:
        models = SimpleNamespace(generate_content=lambda **kw: SimpleNamespace(text="lol"))
        director = CommentaryDirector(
            client=CommentaryClient(api_key=None, backend=SimpleNamespace(models=models)),
            executor=ImmediateExecutor(),
        )
    return PlaySession(
        game=make_game(("O",), events=events),
        events=events,
        director=director,
        highscores=HighScoreStore(tmp_path / "hs.json"),
        save_path=tmp_path / "save.json",
    )


def test_session_actions_drive_the_game(tmp_path: Path) -> None:
    s = _session(tmp_path)
    assert not s.handle("left")
    assert s.handle("start")
    assert s.game.status == GameStatus.PLAYING

    assert s.handle("left")
    assert s.handle("right")
    assert s.handle("soft_drop")
    assert s.handle("rotate")
    assert s.handle("hard_drop")
    assert s.game.score == 2 * 17

    assert s.handle("pause")
    assert not s.handle("right")
    assert s.handle("pause")
    assert s.game.status == GameStatus.PLAYING


def test_session_rejects_unknown_action(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="unknown action"):
        _session(tmp_path).handle("hold")


def test_gravity_steps_once_per_interval(tmp_path: Path) -> None:
    s = _session(tmp_path)
    s.start()
    s.update(1000)
    assert s.game.active.pos.y == 0
    s.update(1)
    assert s.game.active.pos.y == 1

    s.handle("pause")
    s.update(5000)
    assert s.game.active.pos.y == 1


def test_game_over_records_high_score(tmp_path: Path) -> None:
    s = _session(tmp_path)
    s.start()
    for _ in range(10):
        s.handle("hard_drop")

    assert s.game.status == GameStatus.GAME_OVER
    assert s.best_score() == 180
    assert HighScoreStore(tmp_path / "hs.json").best() == 180
    assert not s.handle("hard_drop")


def test_save_and_load_restore_paused(tmp_path: Path) -> None:
    s = _session(tmp_path)
    assert not s.save()
    assert s.message == "Nothing to save"

    s.start()
    s.handle("hard_drop")
    assert s.save()
    saved = s.game.get_state()

    s.handle("hard_drop")
    assert s.load()
    assert s.game.status == GameStatus.PAUSED
    assert s.game.score == saved.score
    assert s.game.board.to_rows() == saved.grid


def test_load_failure_keeps_game_and_reports(tmp_path: Path) -> None:
    s = _session(tmp_path)
    s.start()
    before = s.game.get_state()
    assert not s.load()
    assert s.message is not None and s.message.startswith("Load failed")
    assert s.game.get_state() == before


def test_session_wires_commentary(tmp_path: Path) -> None:
    s = _session(tmp_path, with_director=True)
    assert s.commentary() is None
    s.start()
    assert s.commentary().text == "Let's see if you're better than the last one..."
    for _ in range(10):
        s.handle("hard_drop")
    assert s.commentary().text == "lol"
    assert s.commentary().mood == "roasting"
    assert not s.commentary_loading()


def test_loading_a_save_clears_the_greeting(tmp_path: Path) -> None:
    s = _session(tmp_path, with_director=True)
    s.start()
    s.save()
    assert s.load()
    assert s.commentary() is None
