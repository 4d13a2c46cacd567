# src/tetris_heckler/runtime/__init__.py
from __future__ import annotations

from tetris_heckler.runtime.drop_timer import DropTimer
from tetris_heckler.runtime.pause import toggle_pause
from tetris_heckler.runtime.session import PlaySession

__all__ = ["DropTimer", "PlaySession", "toggle_pause"]
