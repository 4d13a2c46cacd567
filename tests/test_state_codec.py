# tests/test_state_codec.py
from __future__ import annotations

import json
from dataclasses import replace

import numpy as np
import pytest

from conftest import make_game
from tetris_heckler.game.core.game import TetrisGame
from tetris_heckler.game.core.state_codec import (
    StateError,
    dumps_state,
    loads_state,
    state_from_dict,
    state_to_dict,
)
from tetris_heckler.game.core.types import GameStatus, PieceKind, Position


def _played(seed: int = 5) -> TetrisGame:
    g = TetrisGame(rng=np.random.default_rng(seed))
    g.start()
    for _ in range(6):
        g.move(-1, 0)
        g.hard_drop()
    g.rotate()
    g.move(0, 1)
    return g


def test_state_survives_json_roundtrip() -> None:
    state = _played().get_state()
    assert loads_state(dumps_state(state)) == state


def test_saved_keys_use_camel_case() -> None:
    data = state_to_dict(_played().get_state())
    assert set(data) == {"grid", "activePiece", "score", "lines", "level", "status", "nextPieceType"}
    assert set(data["activePiece"]) == {"type", "shape", "pos", "color"}
    assert data["status"] == "PLAYING"


def test_restore_onto_fresh_engine_comes_back_paused() -> None:
    state = _played().get_state()
    fresh = make_game(("I",))
    fresh.restore_state(state)

    assert fresh.status == GameStatus.PAUSED
    assert fresh.get_state() == replace(state, status=GameStatus.PAUSED)
    assert not fresh.move(1, 0)

    fresh.status = GameStatus.PLAYING
    assert fresh.board_snapshot() == _played().board_snapshot()


def test_restore_without_active_piece() -> None:
    state = replace(make_game().get_state(), status=GameStatus.IDLE)
    assert state.active_piece is None
    g = make_game()
    g.restore_state(state)
    assert g.active is None
    assert g.status == GameStatus.PAUSED


def _mutated(**changes: object) -> dict:
    data = json.loads(dumps_state(_played().get_state()))
    data.update(changes)
    return data


@pytest.mark.parametrize(
    "changes",
    [
        {"grid": [[0] * 10 for _ in range(19)]},
        {"grid": [[0] * 9 for _ in range(20)]},
        {"grid": [[8] * 10 for _ in range(20)]},
        {"score": 1.5},
        {"score": "10"},
        {"score": -1},
        {"level": 0},
        {"status": "RUNNING"},
        {"nextPieceType": "X"},
        {"activePiece": {"type": "T", "shape": [[1, 1], [1]], "pos": {"x": 0, "y": 0}, "color": [1, 2, 3]}},
        {"activePiece": {"type": "T", "shape": [[1, 1]], "pos": {"x": 0, "y": 0}, "color": [1, 2, 300]}},
    ],
)
def test_malformed_state_is_rejected(changes: dict) -> None:
    with pytest.raises(StateError):
        state_from_dict(_mutated(**changes))


def test_missing_key_is_rejected() -> None:
    data = _mutated()
    del data["nextPieceType"]
    with pytest.raises(StateError):
        state_from_dict(data)


def test_non_mapping_and_bad_json_are_rejected() -> None:
    with pytest.raises(StateError):
        state_from_dict([1, 2, 3])  # type: ignore[arg-type]
    with pytest.raises(StateError):
        loads_state("{not json")


def test_failed_restore_leaves_engine_untouched() -> None:
    g = _played()
    before = g.get_state()
    bad_grid = tuple(tuple(9 for _ in row) for row in before.grid)

    with pytest.raises(StateError):
        g.restore_state(replace(before, grid=bad_grid))
    with pytest.raises(StateError):
        g.restore_state(replace(before, score=-5))

    assert g.get_state() == before
    assert g.status == GameStatus.PLAYING


def test_loaded_piece_kind_is_enum() -> None:
    state = loads_state(dumps_state(_played().get_state()))
    assert isinstance(state.next_piece_kind, PieceKind)
    assert state.active_piece is not None
    assert isinstance(state.active_piece.kind, PieceKind)


def test_level_must_match_cleared_lines() -> None:
    with pytest.raises(StateError, match="level"):
        state_from_dict(_mutated(lines=12, level=1))
    state = state_from_dict(_mutated(lines=12, level=2))
    assert (state.lines, state.level) == (12, 2)


def test_restore_rejects_piece_overlapping_locked_cells() -> None:
    g = _played()
    before = g.get_state()
    ap = before.active_piece
    assert ap is not None

    rows = [list(row) for row in before.grid]
    x, y = next((cx, cy) for cx, cy in ap.cells() if cy >= 0)
    rows[y][x] = 1
    overlapping = replace(before, grid=tuple(tuple(r) for r in rows))

    fresh = make_game()
    with pytest.raises(StateError, match="overlaps"):
        fresh.restore_state(overlapping)
    assert fresh.status == GameStatus.IDLE
    assert fresh.active is None


def test_restore_rejects_piece_outside_the_board() -> None:
    before = _played().get_state()
    ap = before.active_piece
    assert ap is not None
    off_board = replace(before, active_piece=replace(ap, pos=Position(-3, ap.pos.y)))

    g = make_game()
    with pytest.raises(StateError):
        g.restore_state(off_board)
