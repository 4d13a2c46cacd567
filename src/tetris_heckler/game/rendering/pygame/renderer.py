# src/tetris_heckler/game/rendering/pygame/renderer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from tetris_heckler.commentary.types import Commentary
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.types import GameStatus
from tetris_heckler.game.rendering.projection import ghost_position
from tetris_heckler.game.rendering.pygame.grid import draw_grid
from tetris_heckler.game.rendering.pygame.palette import Palette
from tetris_heckler.game.rendering.pygame.sidebar import draw_sidebar
from tetris_heckler.game.rendering.pygame.surf import SurfaceCache, blit_text
from tetris_heckler.game.rendering.pygame.window import Layout, compute_layout, create_window

__all__ = ["Palette", "TetrisRenderer"]

_OVERLAY_TITLES = {
    GameStatus.IDLE: "READY?",
    GameStatus.PAUSED: "PAUSED",
    GameStatus.GAME_OVER: "GAME OVER",
}

_OVERLAY_HINTS = {
    GameStatus.IDLE: "Enter to start",
    GameStatus.PAUSED: "P to resume, Enter to restart",
    GameStatus.GAME_OVER: "Enter to play again",
}


@dataclass(frozen=True)
class Fonts:
    title: pygame.font.Font
    small: pygame.font.Font
    tiny: pygame.font.Font


class TetrisRenderer:
    """
    Per-frame, read-only drawing of a TetrisGame plus the commentary panel.
    """

    def __init__(
            self,
            *,
            cell: int,
            show_grid_lines: bool,
            show_ghost: bool = True,
            palette: Optional[Palette] = None,
    ) -> None:
        self.cell = int(cell)
        self.show_grid_lines = bool(show_grid_lines)
        self.show_ghost = bool(show_ghost)
        self.palette = palette or Palette()

        title = pygame.font.SysFont("consolas", 28, bold=True) or pygame.font.SysFont(None, 28)
        small = pygame.font.SysFont("consolas", 16) or pygame.font.SysFont(None, 16)
        tiny = pygame.font.SysFont("consolas", 14) or pygame.font.SysFont(None, 14)
        self.fonts = Fonts(title=title, small=small, tiny=tiny)

        self.cache = SurfaceCache()

    def init_window(self, *, board_h: int, board_w: int) -> tuple[pygame.Surface, Layout]:
        layout = compute_layout(board_h=int(board_h), board_w=int(board_w), cell=int(self.cell))
        screen = create_window(layout.window)
        return screen, layout

    def render(
            self,
            *,
            screen: pygame.Surface,
            game: TetrisGame,
            layout: Layout,
            best: int,
            commentary: Optional[Commentary],
            loading: bool,
            message: Optional[str] = None,
    ) -> None:
        screen.fill(self.palette.bg)

        ghost = ghost_position(game) if (self.show_ghost and game.status == GameStatus.PLAYING) else None
        draw_grid(
            screen=screen,
            grid=game.board.grid,
            active=game.active,
            ghost=ghost,
            origin=layout.origin,
            margin=layout.margin,
            cell=self.cell,
            show_grid_lines=self.show_grid_lines,
            palette=self.palette,
            pieces=game.pieces,
            cache=self.cache,
        )

        board_h_px = game.board.h * self.cell + 2 * layout.margin
        draw_sidebar(
            screen=screen,
            x=layout.sidebar_x,
            y=layout.sidebar_y,
            w=layout.sidebar_w,
            h=board_h_px,
            score=int(game.score),
            lines=int(game.lines),
            level=int(game.level),
            best=max(int(best), int(game.score)),
            next_kind=game.next_kind,
            commentary=commentary,
            loading=loading,
            pieces=game.pieces,
            palette=self.palette,
            cache=self.cache,
            font_small=self.fonts.small,
            font_tiny=self.fonts.tiny,
        )

        if game.status != GameStatus.PLAYING:
            self._draw_overlay(screen=screen, game=game, layout=layout)

        if message:
            ox, oy = layout.origin
            blit_text(
                screen=screen,
                font=self.fonts.tiny,
                text=message,
                pos=(ox, oy + game.board.h * self.cell + layout.margin + 2),
                color=self.palette.warn,
            )

    def _draw_overlay(self, *, screen: pygame.Surface, game: TetrisGame, layout: Layout) -> None:
        ox, oy = layout.origin
        w = game.board.w * self.cell
        h = game.board.h * self.cell
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(self.palette.overlay_rgba)
        screen.blit(overlay, (ox, oy))

        title = _OVERLAY_TITLES.get(game.status, "")
        hint = _OVERLAY_HINTS.get(game.status, "")
        tw = self.fonts.title.size(title)[0]
        hw = self.fonts.tiny.size(hint)[0]
        blit_text(screen=screen, font=self.fonts.title, text=title, pos=(ox + (w - tw) // 2, oy + h // 2 - 30), color=self.palette.text)
        blit_text(screen=screen, font=self.fonts.tiny, text=hint, pos=(ox + (w - hw) // 2, oy + h // 2 + 10), color=self.palette.muted)
