# src/tetris_heckler/utils/paths.py
from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    """
    Return the installed tetris_heckler package directory.
    """
    return Path(__file__).resolve().parents[1]


def assets_dir() -> Path:
    """
    Return <package>/assets (must exist).
    """
    p = package_root() / "assets"
    if not p.is_dir():
        raise FileNotFoundError(f"Assets directory not found: {p}")
    return p


def pieces_dir() -> Path:
    """
    Return <package>/assets/pieces (must exist).
    """
    p = assets_dir() / "pieces"
    if not p.is_dir():
        raise FileNotFoundError(f"Pieces directory not found: {p}")
    return p

