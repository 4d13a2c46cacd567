# src/tetris_heckler/game/rendering/pygame/app.py
from __future__ import annotations

import logging

import pygame

from tetris_heckler.config.root import UIConfig
from tetris_heckler.game.rendering.pygame.renderer import TetrisRenderer
from tetris_heckler.runtime.session import PlaySession

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_a: "left",
    pygame.K_LEFT: "left",
    pygame.K_d: "right",
    pygame.K_RIGHT: "right",
    pygame.K_s: "soft_drop",
    pygame.K_DOWN: "soft_drop",
    pygame.K_w: "rotate",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "hard_drop",
    pygame.K_p: "pause",
    pygame.K_RETURN: "start",
    pygame.K_r: "start",
    pygame.K_F5: "save",
    pygame.K_F9: "load",
    pygame.K_ESCAPE: "quit",
}


def run_play(*, session: PlaySession, ui: UIConfig) -> int:
    """
    Drive a PlaySession with pygame: gravity from the frame clock, keys from the event
    queue, one read-only render per frame.
    """
    pygame.init()
    try:
        if ui.key_repeat:
            pygame.key.set_repeat(170, 50)

        renderer = TetrisRenderer(cell=ui.cell, show_grid_lines=ui.show_grid, show_ghost=ui.ghost)
        game = session.game
        screen, layout = renderer.init_window(board_h=game.board.h, board_w=game.board.w)
        clock = pygame.time.Clock()

        running = True
        while running:
            elapsed_ms = clock.tick(int(ui.fps))

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type != pygame.KEYDOWN:
                    continue
                action = KEYMAP.get(event.key)
                if action is None:
                    continue
                if action == "quit":
                    running = False
                    break
                session.handle(action)

            session.update(elapsed_ms)

            renderer.render(
                screen=screen,
                game=game,
                layout=layout,
                best=session.best_score(),
                commentary=session.commentary(),
                loading=session.commentary_loading(),
                message=session.message,
            )
            pygame.display.flip()
    finally:
        if session.director is not None:
            session.director.shutdown()
        pygame.quit()
    return 0


__all__ = ["KEYMAP", "run_play"]
