# src/tetris_heckler/game/core/pieceset.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import yaml

from tetris_heckler.game.core.constants import KIND_ORDER
from tetris_heckler.game.core.types import Color, PieceKind, Shape
from tetris_heckler.utils.paths import pieces_dir

_FALLBACK_COLOR: Color = (180, 180, 200)


def _parse_color(v: object) -> Optional[Color]:
    if v is None:
        return None
    if not isinstance(v, (list, tuple)) or len(v) != 3:
        raise ValueError(f"color must be a 3-item list/tuple, got {v!r}")
    r, g, b = v
    for c in (r, g, b):
        if not isinstance(c, int) or not (0 <= c <= 255):
            raise ValueError(f"color components must be ints in [0,255], got {v!r}")
    return int(r), int(g), int(b)


def _parse_shape(rows: Sequence[str]) -> np.ndarray:
    if not isinstance(rows, (list, tuple)) or len(rows) == 0:
        raise ValueError("shape must be a non-empty list of strings")

    width = None
    out: List[List[int]] = []
    for r in rows:
        if not isinstance(r, str) or len(r) == 0:
            raise ValueError(f"shape rows must be non-empty strings, got {r!r}")
        if width is None:
            width = len(r)
        elif len(r) != width:
            raise ValueError(f"shape rows must have equal width, got widths {width} and {len(r)}")

        out.append([1 if ch == "#" else 0 for ch in r])

    arr = np.asarray(out, dtype=np.uint8)
    if int(arr.sum()) <= 0:
        raise ValueError("shape must have at least one filled cell ('#')")
    return arr


@dataclass(frozen=True)
class PieceDef:
    kind: PieceKind
    shape: np.ndarray  # (H,W) uint8 mask 0/1, spawn orientation
    color: Optional[Color] = None

    def spawn_shape(self) -> Shape:
        return tuple(tuple(int(v) for v in row) for row in self.shape)


@dataclass(frozen=True)
class PieceSet:
    """
    Spawn geometry + colors for the seven kinds, loaded from YAML.

    Provides:
      - canonical ordering of kinds (I, J, L, O, S, T, Z)
      - board_id(kind) in 1..7 (0 reserved for empty)
      - spawn_shape(kind) as an immutable 0/1 matrix
    """

    pieces: Dict[PieceKind, PieceDef]
    kind_order: Tuple[PieceKind, ...]

    @staticmethod
    def default_classic7_path() -> Path:
        return pieces_dir() / "classic7.yaml"

    @classmethod
    def from_yaml(cls, path: Path, *, expected_cells: Optional[int] = None) -> "PieceSet":
        p = Path(path)
        data = yaml.safe_load(p.read_text(encoding="utf-8"))

        if not isinstance(data, dict):
            raise ValueError(f"piece YAML must be a mapping at top-level, got {type(data)!r}")

        if expected_cells is None:
            v = data.get("expected_cells", None)
            if isinstance(v, int):
                expected_cells = v
            elif v is not None:
                raise TypeError(f"expected_cells must be int, got {type(v)!r}")

        pieces_node = data.get("pieces")
        if not isinstance(pieces_node, dict) or not pieces_node:
            raise ValueError("piece YAML must contain non-empty mapping 'pieces:'")

        names = tuple(str(k) for k in pieces_node.keys())
        if names != KIND_ORDER:
            raise ValueError(f"piece YAML must list kinds in order {list(KIND_ORDER)!r}, got {list(names)!r}")

        pieces: Dict[PieceKind, PieceDef] = {}
        kind_order: List[PieceKind] = []

        for name, spec in pieces_node.items():
            kind = PieceKind(str(name))
            if not isinstance(spec, dict):
                raise ValueError(f"piece spec for {name!r} must be a mapping, got {type(spec)!r}")

            shape = _parse_shape(spec.get("shape"))
            if expected_cells is not None and int(shape.sum()) != int(expected_cells):
                raise ValueError(f"{name!r}: expected {expected_cells} filled cells, got {int(shape.sum())}")

            pieces[kind] = PieceDef(kind=kind, shape=shape, color=_parse_color(spec.get("color")))
            kind_order.append(kind)

        return cls(pieces=pieces, kind_order=tuple(kind_order))

    def kinds(self) -> Tuple[PieceKind, ...]:
        return self.kind_order

    def get(self, kind: PieceKind | str) -> PieceDef:
        try:
            return self.pieces[PieceKind(kind)]
        except (KeyError, ValueError) as e:
            raise KeyError(f"unknown piece kind {kind!r}. known kinds={[k.value for k in self.kind_order]!r}") from e

    def spawn_shape(self, kind: PieceKind | str) -> Shape:
        return self.get(kind).spawn_shape()

    def board_id(self, kind: PieceKind | str) -> int:
        return int(self.kind_order.index(self.get(kind).kind) + 1)

    def board_id_to_kind(self, board_id: int) -> PieceKind:
        bid = int(board_id)
        if bid <= 0 or bid > len(self.kind_order):
            raise ValueError(f"board_id out of range: {bid} (valid 1..{len(self.kind_order)})")
        return self.kind_order[bid - 1]

    def color_of(self, kind: PieceKind | str) -> Color:
        return self.get(kind).color or _FALLBACK_COLOR


@lru_cache(maxsize=1)
def classic7() -> PieceSet:
    return PieceSet.from_yaml(PieceSet.default_classic7_path(), expected_cells=4)


__all__ = ["PieceDef", "PieceSet", "classic7"]
