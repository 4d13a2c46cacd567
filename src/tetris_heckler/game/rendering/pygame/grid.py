# src/tetris_heckler/game/rendering/pygame/grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_heckler.game.core.pieceset import PieceSet
from tetris_heckler.game.core.types import Position, Tetromino
from tetris_heckler.game.rendering.pygame.palette import Color, Palette
from tetris_heckler.game.rendering.pygame.surf import SurfaceCache


@dataclass(frozen=True)
class GridRenderCfg:
    border_width: int = 2
    grid_line_width: int = 1


CFG = GridRenderCfg()


def draw_grid(
        *,
        screen: pygame.Surface,
        grid: np.ndarray,
        active: Optional[Tetromino],
        ghost: Optional[Position],
        origin: Tuple[int, int],
        margin: int,
        cell: int,
        show_grid_lines: bool,
        palette: Palette,
        pieces: PieceSet,
        cache: SurfaceCache,
) -> None:
    """
    Draw the locked board, then the ghost projection, then the active piece on top.
    Reads only; never touches engine state.
    """
    arr = np.asarray(grid)
    ox, oy = origin
    h, w = int(arr.shape[0]), int(arr.shape[1])

    for y in range(h):
        for x in range(w):
            board_id = int(arr[y, x])
            rx = ox + x * cell
            ry = oy + y * cell
            if board_id == 0:
                screen.blit(cache.flat(size=cell, color=palette.empty), (rx, ry))
            else:
                color = _board_id_to_color(board_id=board_id, palette=palette, pieces=pieces)
                screen.blit(cache.cell(size=cell, color=color), (rx, ry))
            if show_grid_lines:
                pygame.draw.rect(
                    screen,
                    palette.grid,
                    pygame.Rect(rx, ry, cell, cell),
                    width=int(CFG.grid_line_width),
                )

    if active is not None:
        if ghost is not None and ghost.y != active.pos.y:
            surf = cache.ghost(size=cell, color=active.color, alpha=palette.ghost_alpha)
            _blit_shape(screen=screen, piece=active, at=ghost, origin=origin, cell=cell, surf=surf, rows=h)
        surf = cache.cell(size=cell, color=active.color)
        _blit_shape(screen=screen, piece=active, at=active.pos, origin=origin, cell=cell, surf=surf, rows=h)

    pygame.draw.rect(
        screen,
        palette.border,
        pygame.Rect(ox - margin, oy - margin, w * cell + 2 * margin, h * cell + 2 * margin),
        width=int(CFG.border_width),
    )


def _blit_shape(
        *,
        screen: pygame.Surface,
        piece: Tetromino,
        at: Position,
        origin: Tuple[int, int],
        cell: int,
        surf: pygame.Surface,
        rows: int,
) -> None:
    ox, oy = origin
    for yy, row in enumerate(piece.shape):
        for xx, v in enumerate(row):
            if v == 0:
                continue
            gy = at.y + yy
            if gy < 0 or gy >= rows:
                continue
            screen.blit(surf, (ox + (at.x + xx) * cell, oy + gy * cell))


def _board_id_to_color(*, board_id: int, palette: Palette, pieces: PieceSet) -> Color:
    try:
        kind = pieces.board_id_to_kind(int(board_id))
    except ValueError:
        return palette.fallback_piece
    return pieces.color_of(kind)
