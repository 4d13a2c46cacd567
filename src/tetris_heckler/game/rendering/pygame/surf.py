# src/tetris_heckler/game/rendering/pygame/surf.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import pygame

from tetris_heckler.game.rendering.pygame.palette import Color, shade

BEVEL_PX_DIV = 8


@dataclass
class SurfaceCache:
    """
    Cache small surfaces (bevelled blocks, ghost cells) by (size, color).
    This avoids re-allocating surfaces every frame.
    """

    _cells: Dict[Tuple[int, Color], pygame.Surface]
    _flats: Dict[Tuple[int, Color], pygame.Surface]
    _ghosts: Dict[Tuple[int, Color, int], pygame.Surface]

    def __init__(self) -> None:
        self._cells = {}
        self._flats = {}
        self._ghosts = {}

    def cell(self, *, size: int, color: Color) -> pygame.Surface:
        key = (int(size), color)
        surf = self._cells.get(key)
        if surf is None:
            surf = _bevel_block(size=int(size), color=color)
            self._cells[key] = surf
        return surf

    def flat(self, *, size: int, color: Color) -> pygame.Surface:
        key = (int(size), color)
        surf = self._flats.get(key)
        if surf is None:
            s = int(size)
            surf = pygame.Surface((s, s), flags=pygame.SRCALPHA)
            surf.fill(color)
            self._flats[key] = surf
        return surf

    def ghost(self, *, size: int, color: Color, alpha: int) -> pygame.Surface:
        key = (int(size), color, int(alpha))
        surf = self._ghosts.get(key)
        if surf is None:
            s = int(size)
            surf = pygame.Surface((s, s), flags=pygame.SRCALPHA)
            surf.fill((color[0], color[1], color[2], int(alpha)))
            pygame.draw.rect(surf, color, pygame.Rect(0, 0, s, s), width=1)
            self._ghosts[key] = surf
        return surf


def _bevel_block(*, size: int, color: Color) -> pygame.Surface:
    s = int(size)
    b = max(1, s // BEVEL_PX_DIV)
    surf = pygame.Surface((s, s), flags=pygame.SRCALPHA)
    surf.fill(color)
    # light top/left edges, dark bottom/right edges
    pygame.draw.polygon(surf, shade(color, 1.35), [(0, 0), (s, 0), (s - b, b), (b, b), (b, s - b), (0, s)])
    pygame.draw.polygon(surf, shade(color, 0.55), [(s, s), (0, s), (b, s - b), (s - b, s - b), (s - b, b), (s, 0)])
    return surf


def blit_text(
        *,
        screen: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        pos: Tuple[int, int],
        color: Color,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def wrap_text(*, font: pygame.font.Font, text: str, max_w: int) -> List[str]:
    """
    Greedy word wrap by rendered pixel width.
    """
    lines: List[str] = []
    cur = ""
    for word in str(text).split():
        cand = word if not cur else f"{cur} {word}"
        if font.size(cand)[0] <= int(max_w) or not cur:
            cur = cand
        else:
            lines.append(cur)
            cur = word
    if cur:
        lines.append(cur)
    return lines
