# src/tetris_heckler/runtime/session.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from tetris_heckler.commentary.director import CommentaryDirector
from tetris_heckler.commentary.types import Commentary
from tetris_heckler.game.core.events import EventQueue, GameOver
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.state_codec import StateError
from tetris_heckler.game.core.types import GameStatus
from tetris_heckler.persistence.highscore import HighScoreStore
from tetris_heckler.persistence.savegame import load_game, save_game
from tetris_heckler.runtime.drop_timer import DropTimer
from tetris_heckler.runtime.pause import toggle_pause

logger = logging.getLogger(__name__)

ACTIONS = ("left", "right", "soft_drop", "rotate", "hard_drop", "pause", "start", "save", "load")


class PlaySession:
    """
    Everything the play loop does except drawing and reading the keyboard.

    The engine's events land in `events` (an EventQueue passed as its sink) and are
    drained once per frame by update().
    """

    def __init__(
            self,
            *,
            game: TetrisGame,
            events: EventQueue,
            director: Optional[CommentaryDirector] = None,
            highscores: Optional[HighScoreStore] = None,
            save_path: Optional[Path] = None,
    ) -> None:
        self.game = game
        self.events = events
        self.director = director
        self.highscores = highscores
        self.save_path = Path(save_path) if save_path is not None else None
        self.timer = DropTimer()
        self.message: Optional[str] = None
        self._best = highscores.best() if highscores is not None else 0

    # ---- per-frame -----------------------------------------------------------------

    def update(self, elapsed_ms: float) -> None:
        if self.game.status == GameStatus.PLAYING:
            if self.timer.advance(elapsed_ms, level=self.game.level):
                self.game.move(0, 1)
        self.dispatch_events()
        if self.director is not None:
            self.director.tick(self.game)

    def dispatch_events(self) -> None:
        for ev in self.events.drain():
            if isinstance(ev, GameOver) and self.highscores is not None:
                if self.highscores.submit(self.game.score):
                    self._best = int(self.game.score)
            if self.director is not None:
                self.director.on_event(ev, self.game)

    # ---- input ---------------------------------------------------------------------

    def handle(self, action: str) -> bool:
        """
        Apply a named action. Returns whether anything changed.
        """
        a = str(action).lower()
        g = self.game
        if a == "left":
            return g.move(-1, 0)
        if a == "right":
            return g.move(1, 0)
        if a == "soft_drop":
            changed = g.move(0, 1)
            self.dispatch_events()
            return changed
        if a == "rotate":
            return g.rotate()
        if a == "hard_drop":
            if not g.is_playing:
                return False
            g.hard_drop()
            self.dispatch_events()
            return True
        if a == "pause":
            before = g.status
            return toggle_pause(g) != before
        if a == "start":
            self.start()
            return True
        if a == "save":
            return self.save()
        if a == "load":
            return self.load()
        raise ValueError(f"unknown action {action!r} (expected one of {ACTIONS})")

    def start(self) -> None:
        self.game.start()
        self.timer.reset()
        self.message = None
        if self.director is not None:
            self.director.start_session()
        self.dispatch_events()

    def save(self) -> bool:
        if self.save_path is None:
            return False
        if self.game.status not in (GameStatus.PLAYING, GameStatus.PAUSED):
            self.message = "Nothing to save"
            return False
        try:
            save_game(self.save_path, self.game.get_state())
        except OSError as e:
            logger.warning("save failed: %s", e)
            self.message = f"Save failed: {e}"
            return False
        self.message = "Game saved"
        return True

    def load(self) -> bool:
        if self.save_path is None:
            return False
        try:
            state = load_game(self.save_path)
            self.game.restore_state(state)
        except StateError as e:
            logger.warning("load failed: %s", e)
            self.message = f"Load failed: {e}"
            return False
        self.timer.reset()
        self.message = "Game loaded (paused)"
        if self.director is not None:
            self.director.start_session(greeting=None)
        return True

    # ---- views ---------------------------------------------------------------------

    def best_score(self) -> int:
        return self._best

    def commentary(self) -> Optional[Commentary]:
        return self.director.surface.current() if self.director is not None else None

    def commentary_loading(self) -> bool:
        return self.director.surface.loading if self.director is not None else False


__all__ = ["ACTIONS", "PlaySession"]
