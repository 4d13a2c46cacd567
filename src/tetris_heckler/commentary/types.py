# src/tetris_heckler/commentary/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Mood = Literal["neutral", "sarcastic", "encouraging", "roasting"]

MOODS: tuple[Mood, ...] = ("neutral", "sarcastic", "encouraging", "roasting")

# Event names sent to the commentary service
EVENT_GAME_OVER = "GAME_OVER"
EVENT_TETRIS = "TETRIS"
EVENT_LINE_CLEAR = "LINE_CLEAR"
EVENT_INTERVAL = "INTERVAL"


@dataclass(frozen=True)
class Commentary:
    text: str
    mood: Mood = "neutral"


MISSING_KEY_COMMENTARY = Commentary(text="API Key missing. I can't see your terrible gameplay.", mood="neutral")
GLITCH_COMMENTARY = Commentary(text="I'm having a glitch... just like your gameplay.", mood="neutral")
GREETING_COMMENTARY = Commentary(text="Let's see if you're better than the last one...", mood="neutral")


__all__ = [
    "Commentary",
    "EVENT_GAME_OVER",
    "EVENT_INTERVAL",
    "EVENT_LINE_CLEAR",
    "EVENT_TETRIS",
    "GLITCH_COMMENTARY",
    "GREETING_COMMENTARY",
    "MISSING_KEY_COMMENTARY",
    "MOODS",
    "Mood",
]
