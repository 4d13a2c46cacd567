# src/tetris_heckler/commentary/director.py
from __future__ import annotations

import logging
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional

from tetris_heckler.commentary.client import CommentaryClient
from tetris_heckler.commentary.surface import CommentarySurface
from tetris_heckler.commentary.types import EVENT_INTERVAL, GREETING_COMMENTARY, Commentary
from tetris_heckler.game.core.events import GameEvent, GameOver, Tetris
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.types import GameStatus

logger = logging.getLogger(__name__)


class CommentaryDirector:
    """
    Decides when to ask for commentary and runs requests off the game loop.

    Triggers:
      - GameOver / Tetris events, always
      - any event or tick once `interval_s` has passed since the last request, while PLAYING

    The board snapshot, score and lines are captured on the caller's thread at trigger
    time; the worker only talks to the client. Results go to the surface and never
    touch the engine.
    """

    def __init__(
            self,
            *,
            client: CommentaryClient,
            surface: Optional[CommentarySurface] = None,
            interval_s: float = 30.0,
            clock: Callable[[], float] = time.monotonic,
            executor: Optional[Executor] = None,
    ) -> None:
        self.client = client
        self.surface = surface if surface is not None else CommentarySurface()
        self.interval_s = float(interval_s)
        self._clock = clock
        self._owns_executor = executor is None
        self._executor: Executor = executor if executor is not None else ThreadPoolExecutor(max_workers=1, thread_name_prefix="commentary")
        self._last_request_at = self._clock()

    def start_session(self, greeting: Optional[Commentary] = GREETING_COMMENTARY) -> int:
        """
        Call when a new game starts. In-flight replies from the previous game are dropped.
        """
        self._last_request_at = self._clock()
        return self.surface.new_session(greeting)

    def on_event(self, event: GameEvent, game: TetrisGame) -> bool:
        major = isinstance(event, (GameOver, Tetris))
        if major or self._interval_due(game):
            self._request(event.name, game)
            return True
        return False

    def tick(self, game: TetrisGame) -> bool:
        if self._interval_due(game):
            self._request(EVENT_INTERVAL, game)
            return True
        return False

    def shutdown(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    # ---- internals -----------------------------------------------------------------

    def _interval_due(self, game: TetrisGame) -> bool:
        if game.status != GameStatus.PLAYING:
            return False
        return (self._clock() - self._last_request_at) >= self.interval_s

    def _request(self, event_name: str, game: TetrisGame) -> None:
        self._last_request_at = self._clock()
        session = self.surface.session
        snapshot = game.board_snapshot()
        score, lines = int(game.score), int(game.lines)

        self.surface.begin_request(session)
        logger.debug("commentary requested: event=%s session=%d", event_name, session)
        fut = self._executor.submit(
            self.client.comment,
            event=event_name,
            board_snapshot=snapshot,
            score=score,
            lines=lines,
        )
        fut.add_done_callback(lambda f: self._deliver(f, session=session))

    def _deliver(self, fut: Future, *, session: int) -> None:
        if fut.cancelled():
            self.surface.finish_request(session)
            return
        exc = fut.exception()
        if exc is not None:
            logger.warning("commentary worker failed: %r", exc)
            self.surface.finish_request(session)
            return
        kept = self.surface.publish(fut.result(), session=session)
        if not kept:
            logger.debug("dropped stale commentary from session %d", session)


__all__ = ["CommentaryDirector"]
