# src/tetris_heckler/commentary/surface.py
from __future__ import annotations

import threading
from typing import Optional

from tetris_heckler.commentary.types import Commentary


class CommentarySurface:
    """
    Display-only slot for the latest comment.

    Written from the worker thread, read by the render loop. Last write wins; writes
    tagged with an older session are ignored.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[Commentary] = None
        self._session = 0
        self._pending = 0

    @property
    def session(self) -> int:
        with self._lock:
            return self._session

    def new_session(self, greeting: Optional[Commentary] = None) -> int:
        with self._lock:
            self._session += 1
            self._pending = 0
            self._current = greeting
            return self._session

    def begin_request(self, session: int) -> None:
        with self._lock:
            if session == self._session:
                self._pending += 1

    def finish_request(self, session: int) -> None:
        """
        Close a request that produced nothing to show (worker failed or was cancelled).
        """
        with self._lock:
            if session == self._session:
                self._pending = max(0, self._pending - 1)

    def publish(self, commentary: Commentary, *, session: int) -> bool:
        """
        Store `commentary` if it belongs to the current session. Returns whether it was kept.
        """
        with self._lock:
            if session != self._session:
                return False
            self._pending = max(0, self._pending - 1)
            self._current = commentary
            return True

    def current(self) -> Optional[Commentary]:
        with self._lock:
            return self._current

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._pending > 0


__all__ = ["CommentarySurface"]
