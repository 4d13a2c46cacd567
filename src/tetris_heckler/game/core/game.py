# src/tetris_heckler/game/core/game.py
from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional

import numpy as np

from tetris_heckler.game.core.board import Board
from tetris_heckler.game.core.constants import COLS, HARD_DROP_POINTS_PER_CELL, ROWS
from tetris_heckler.game.core.events import EventSink, GameOver, LineClear, Tetris, null_sink
from tetris_heckler.game.core.piece_rules import PieceRule, UniformPieceRule
from tetris_heckler.game.core.pieceset import PieceSet, classic7
from tetris_heckler.game.core.rotation import collides, try_rotate
from tetris_heckler.game.core.rules import ScoreConfig, level_for_lines, score_for_clears
from tetris_heckler.game.core.snapshot import board_snapshot
from tetris_heckler.game.core.state_codec import StateError, validate_state
from tetris_heckler.game.core.types import GameState, GameStatus, PieceKind, Position, Tetromino

logger = logging.getLogger(__name__)


class TetrisGame:
    """
    Authoritative falling-block engine.

    Contracts:

      - board.grid is the LOCKED board only; the active piece lives in `active`.
      - Every public mutation is a silent no-op unless status is PLAYING and a piece is active.
      - `status` is a plain attribute: the driver flips PLAYING <-> PAUSED itself.
      - Events are delivered synchronously to `event_sink` at the point they happen.

      - BOARD cell encoding:
          0 = empty
          1..7 = kind index in (I, J, L, O, S, T, Z) + 1
    """

    def __init__(
            self,
            *,
            event_sink: Optional[EventSink] = None,
            piece_set: Optional[PieceSet] = None,
            piece_rule: Optional[PieceRule] = None,
            rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.pieces = piece_set if piece_set is not None else classic7()
        self.score_cfg = ScoreConfig()
        self._emit: EventSink = event_sink if event_sink is not None else null_sink

        self._rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
        self._piece_rule: PieceRule = piece_rule if piece_rule is not None else UniformPieceRule()
        self._piece_rule.reset(rng=self._rng, kinds=self.pieces.kinds())

        self.board = Board.empty(h=ROWS, w=COLS)
        self.active: Optional[Tetromino] = None
        self.next_kind: PieceKind = self._piece_rule.next_piece()

        self.score = 0
        self.lines = 0
        self.level = 1
        self.status = GameStatus.IDLE

    # ---- lifecycle -----------------------------------------------------------------

    def start(self) -> None:
        self.board = Board.empty(h=ROWS, w=COLS)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.status = GameStatus.PLAYING
        self._spawn()

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING and self.active is not None

    # ---- mutations -----------------------------------------------------------------

    def move(self, dx: int, dy: int) -> bool:
        """
        Shift the active piece. A blocked downward move locks the piece immediately.
        """
        if not self.is_playing:
            return False
        ap = self.active
        if ap is None:
            return False

        nx, ny = ap.pos.x + int(dx), ap.pos.y + int(dy)
        if not collides(board=self.board, shape=ap.shape, px=nx, py=ny):
            self.active = replace(ap, pos=Position(nx, ny))
            return True

        if dy > 0:
            self._lock_and_advance()
        return False

    def rotate(self) -> bool:
        if not self.is_playing:
            return False
        ap = self.active
        if ap is None:
            return False

        out = try_rotate(board=self.board, shape=ap.shape, px=ap.pos.x, py=ap.pos.y)
        if out is None:
            return False
        shape, nx = out
        self.active = replace(ap, shape=shape, pos=Position(nx, ap.pos.y))
        return True

    def hard_drop(self) -> int:
        """
        Drop until the piece locks. Returns the number of cells fallen.
        """
        if not self.is_playing:
            return 0
        dropped = 0
        while self.move(0, 1):
            self.score += HARD_DROP_POINTS_PER_CELL
            dropped += 1
        return dropped

    # ---- read-only views -----------------------------------------------------------

    def board_snapshot(self) -> str:
        return board_snapshot(self.board.grid)

    def get_state(self) -> GameState:
        return GameState(
            grid=self.board.to_rows(),
            active_piece=self.active,
            next_piece_kind=self.next_kind,
            score=int(self.score),
            lines=int(self.lines),
            level=int(self.level),
            status=self.status,
        )

    def restore_state(self, state: GameState) -> None:
        """
        Replace the whole game from a saved snapshot. The game comes back PAUSED.

        Raises StateError (and leaves the engine untouched) if the snapshot is invalid.
        """
        validate_state(state)
        try:
            board = Board.from_rows(state.grid, h=ROWS, w=COLS)
        except ValueError as e:
            raise StateError(str(e)) from e

        self.board = board
        self.active = state.active_piece
        self.next_kind = PieceKind(state.next_piece_kind)
        self.score = int(state.score)
        self.lines = int(state.lines)
        self.level = int(state.level)
        self.status = GameStatus.PAUSED
        logger.debug("state restored: score=%d lines=%d level=%d", self.score, self.lines, self.level)

    # ---- internals -----------------------------------------------------------------

    def _spawn(self) -> None:
        # Promote preview -> active, then draw a fresh preview.
        kind = self.next_kind
        self.next_kind = self._piece_rule.next_piece()

        shape = self.pieces.spawn_shape(kind)
        width = len(shape[0])
        x = COLS // 2 - math.ceil(width / 2)
        self.active = Tetromino(kind=kind, shape=shape, pos=Position(x, 0), color=self.pieces.color_of(kind))

        if collides(board=self.board, shape=shape, px=x, py=0):
            self.status = GameStatus.GAME_OVER
            logger.debug("spawn blocked for %s: game over (score=%d)", kind.value, self.score)
            self._emit(GameOver())

    def _lock_and_advance(self) -> int:
        """
        Bake the active piece into the board, clear rows, score, then spawn the next piece.
        Returns the number of cleared rows.
        """
        ap = self.active
        if ap is None:
            return 0
        board_id = self.pieces.board_id(ap.kind)

        for x, y in ap.cells():
            # cells still above the visible board are dropped
            if self.board.in_bounds(x, y):
                self.board.grid[y, x] = board_id

        cleared = self.board.clear_full_lines()
        if cleared > 0:
            self.score += score_for_clears(cleared, self.level, self.score_cfg)
            self.lines += cleared
            self.level = level_for_lines(self.lines)
            logger.debug("cleared %d rows: score=%d lines=%d level=%d", cleared, self.score, self.lines, self.level)
            if cleared >= 4:
                self._emit(Tetris())
            else:
                self._emit(LineClear(count=cleared))

        self._spawn()
        return cleared


__all__ = ["TetrisGame"]
