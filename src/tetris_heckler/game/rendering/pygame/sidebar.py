# src/tetris_heckler/game/rendering/pygame/sidebar.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import pygame

from tetris_heckler.commentary.types import Commentary
from tetris_heckler.game.core.pieceset import PieceSet
from tetris_heckler.game.core.types import PieceKind
from tetris_heckler.game.rendering.pygame.palette import Palette
from tetris_heckler.game.rendering.pygame.surf import SurfaceCache, blit_text, wrap_text


@dataclass(frozen=True)
class SidebarLayout:
    """
    Pixel geometry for the sidebar panels.
    """

    panel_gap_y: int = 12

    next_panel_h: int = 130
    stats_panel_h: int = 118
    heckler_panel_h: int = 150
    controls_min_h: int = 96

    title_pad_x: int = 10
    title_pad_y: int = 8

    next_box_y_offset: int = 34
    next_cell: int = 20

    row_y_offset: int = 34
    row_h: int = 20
    value_dx: int = 80

    text_pad_x: int = 12
    text_line_h: int = 20


_LAYOUT = SidebarLayout()

CONTROLS: Tuple[Tuple[str, str], ...] = (
    ("Up / W", "rotate"),
    ("Left / A", "left"),
    ("Right / D", "right"),
    ("Down / S", "soft drop"),
    ("Space", "hard drop"),
    ("P", "pause"),
    ("Enter", "start"),
    ("F5 / F9", "save / load"),
)


def draw_sidebar(
        *,
        screen: pygame.Surface,
        x: int,
        y: int,
        w: int,
        h: int,
        score: int,
        lines: int,
        level: int,
        best: int,
        next_kind: Optional[PieceKind],
        commentary: Optional[Commentary],
        loading: bool,
        pieces: PieceSet,
        palette: Palette,
        cache: SurfaceCache,
        font_small: pygame.font.Font,
        font_tiny: pygame.font.Font,
) -> None:
    """
    Right-hand panels: next piece, stats, heckler commentary, controls.
    """
    # NEXT
    _panel(screen=screen, palette=palette, font=font_small, x=x, y=y, w=w, h=_LAYOUT.next_panel_h, title="NEXT")
    if next_kind is not None:
        _draw_next(screen=screen, kind=next_kind, x=x, y=y, w=w, pieces=pieces, cache=cache)

    # STATS
    sy = y + _LAYOUT.next_panel_h + _LAYOUT.panel_gap_y
    _panel(screen=screen, palette=palette, font=font_small, x=x, y=sy, w=w, h=_LAYOUT.stats_panel_h, title="STATS")
    rows: List[tuple[str, Any]] = [("Score", f"{score:,}"), ("Level", level), ("Lines", lines), ("Best", f"{best:,}")]
    yy = sy + _LAYOUT.row_y_offset
    for k, v in rows:
        lx = x + _LAYOUT.title_pad_x
        blit_text(screen=screen, font=font_tiny, text=f"{k}:", pos=(lx, yy), color=palette.muted)
        blit_text(screen=screen, font=font_tiny, text=str(v), pos=(lx + _LAYOUT.value_dx, yy), color=palette.text)
        yy += _LAYOUT.row_h

    # HECKLER
    hy = sy + _LAYOUT.stats_panel_h + _LAYOUT.panel_gap_y
    _draw_heckler(
        screen=screen,
        x=x,
        y=hy,
        w=w,
        commentary=commentary,
        loading=loading,
        palette=palette,
        font_small=font_small,
        font_tiny=font_tiny,
    )

    # CONTROLS
    cy = hy + _LAYOUT.heckler_panel_h + _LAYOUT.panel_gap_y
    ch = max(_LAYOUT.controls_min_h, int(y + h - cy))
    _panel(screen=screen, palette=palette, font=font_small, x=x, y=cy, w=w, h=ch, title="CONTROLS")
    yy = cy + _LAYOUT.row_y_offset
    bottom_guard = cy + ch - _LAYOUT.row_h
    for key, desc in CONTROLS:
        if yy > bottom_guard:
            break
        blit_text(screen=screen, font=font_tiny, text=key, pos=(x + _LAYOUT.title_pad_x, yy), color=palette.accent)
        blit_text(screen=screen, font=font_tiny, text=desc, pos=(x + w // 2, yy), color=palette.muted)
        yy += _LAYOUT.row_h


def _draw_next(
        *,
        screen: pygame.Surface,
        kind: PieceKind,
        x: int,
        y: int,
        w: int,
        pieces: PieceSet,
        cache: SurfaceCache,
) -> None:
    shape = pieces.spawn_shape(kind)
    filled = [(xx, yy) for yy, row in enumerate(shape) for xx, v in enumerate(row) if v]
    minx = min(c[0] for c in filled)
    maxx = max(c[0] for c in filled)
    miny = min(c[1] for c in filled)
    maxy = max(c[1] for c in filled)

    cell = _LAYOUT.next_cell
    box = 4 * cell
    bx = x + (w - box) // 2
    by = y + _LAYOUT.next_box_y_offset
    off_x = (box - (maxx - minx + 1) * cell) // 2
    off_y = (box - (maxy - miny + 1) * cell) // 2

    surf = cache.cell(size=cell, color=pieces.color_of(kind))
    for cx, cy in filled:
        screen.blit(surf, (bx + off_x + (cx - minx) * cell, by + off_y + (cy - miny) * cell))


def _draw_heckler(
        *,
        screen: pygame.Surface,
        x: int,
        y: int,
        w: int,
        commentary: Optional[Commentary],
        loading: bool,
        palette: Palette,
        font_small: pygame.font.Font,
        font_tiny: pygame.font.Font,
) -> None:
    mood = commentary.mood if commentary is not None else "neutral"
    color = palette.mood_color(mood) if commentary is not None else palette.border

    rect = pygame.Rect(int(x), int(y), int(w), int(_LAYOUT.heckler_panel_h))
    pygame.draw.rect(screen, palette.panel_bg, rect)
    pygame.draw.rect(screen, color, rect, width=2)
    blit_text(
        screen=screen,
        font=font_small,
        text="GAME DIRECTOR",
        pos=(x + _LAYOUT.title_pad_x, y + _LAYOUT.title_pad_y),
        color=palette.muted,
    )

    tx = x + _LAYOUT.text_pad_x
    ty = y + _LAYOUT.row_y_offset
    if loading:
        blit_text(screen=screen, font=font_tiny, text="Analyzing Board...", pos=(tx, ty), color=palette.muted)
        return
    if commentary is None:
        blit_text(screen=screen, font=font_tiny, text="Waiting for gameplay data...", pos=(tx, ty), color=palette.muted)
        return

    max_lines = (_LAYOUT.heckler_panel_h - _LAYOUT.row_y_offset) // _LAYOUT.text_line_h
    lines = wrap_text(font=font_tiny, text=f'"{commentary.text}"', max_w=w - 2 * _LAYOUT.text_pad_x)
    for line in lines[:max_lines]:
        blit_text(screen=screen, font=font_tiny, text=line, pos=(tx, ty), color=color)
        ty += _LAYOUT.text_line_h


def _panel(
        *,
        screen: pygame.Surface,
        palette: Palette,
        font: pygame.font.Font,
        x: int,
        y: int,
        w: int,
        h: int,
        title: Optional[str] = None,
) -> None:
    rect = pygame.Rect(int(x), int(y), int(w), int(h))
    pygame.draw.rect(screen, palette.panel_bg, rect)
    pygame.draw.rect(screen, palette.border, rect, width=2)
    if title:
        tx = int(x) + int(_LAYOUT.title_pad_x)
        ty = int(y) + int(_LAYOUT.title_pad_y)
        blit_text(screen=screen, font=font, text=title, pos=(tx, ty), color=palette.accent)
