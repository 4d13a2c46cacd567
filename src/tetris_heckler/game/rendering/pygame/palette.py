# src/tetris_heckler/game/rendering/pygame/palette.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

Color = Tuple[int, int, int]


def _default_moods() -> Dict[str, Color]:
    return {
        "neutral": (96, 165, 250),
        "sarcastic": (234, 179, 8),
        "encouraging": (34, 197, 94),
        "roasting": (239, 68, 68),
    }


@dataclass(frozen=True)
class Palette:
    bg: Color = (3, 7, 18)
    panel_bg: Color = (17, 24, 39)
    empty: Color = (17, 17, 17)
    grid: Color = (40, 40, 48)
    border: Color = (55, 65, 81)

    text: Color = (229, 231, 235)
    muted: Color = (156, 163, 175)
    warn: Color = (240, 160, 90)
    accent: Color = (192, 132, 252)

    fallback_piece: Color = (180, 180, 200)

    overlay_rgba: Tuple[int, int, int, int] = (0, 0, 0, 200)
    ghost_alpha: int = 70

    moods: Dict[str, Color] = field(default_factory=_default_moods)

    def mood_color(self, mood: str) -> Color:
        return self.moods.get(str(mood), self.moods["neutral"])


def shade(color: Color, factor: float) -> Color:
    """
    Scale a color toward black (factor < 1) or white (factor > 1), clamped to [0,255].
    """
    if factor <= 1.0:
        return (int(color[0] * factor), int(color[1] * factor), int(color[2] * factor))
    t = min(1.0, factor - 1.0)
    return (
        int(color[0] + (255 - color[0]) * t),
        int(color[1] + (255 - color[1]) * t),
        int(color[2] + (255 - color[2]) * t),
    )
