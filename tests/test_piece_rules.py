# tests/test_piece_rules.py
from __future__ import annotations

import numpy as np
import pytest

from tetris_heckler.game.core.piece_rules import UniformPieceRule, make_piece_rule
from tetris_heckler.game.core.pieceset import classic7


def _draw(seed: int, n: int) -> list[str]:
    rule = UniformPieceRule()
    rule.reset(rng=np.random.default_rng(seed), kinds=classic7().kinds())
    return [rule.next_piece().value for _ in range(n)]


def test_uniform_rule_is_reproducible_per_seed() -> None:
    assert _draw(11, 50) == _draw(11, 50)


def test_uniform_rule_covers_all_kinds() -> None:
    assert set(_draw(3, 500)) == set("IJLOSTZ")


def test_make_piece_rule_rejects_unknown_name() -> None:
    assert isinstance(make_piece_rule("uniform"), UniformPieceRule)
    with pytest.raises(ValueError):
        make_piece_rule("bag7")
