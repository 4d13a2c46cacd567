# src/tetris_heckler/commentary/__init__.py
from __future__ import annotations

from tetris_heckler.commentary.client import CommentaryClient
from tetris_heckler.commentary.director import CommentaryDirector
from tetris_heckler.commentary.surface import CommentarySurface
from tetris_heckler.commentary.types import Commentary, Mood

__all__ = ["Commentary", "CommentaryClient", "CommentaryDirector", "CommentarySurface", "Mood"]
