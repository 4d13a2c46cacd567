# src/tetris_heckler/persistence/highscore.py
from __future__ import annotations

import json
import logging
from pathlib import Path

from tetris_heckler.utils.file_io import read_json, write_json

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Single best score kept in a small JSON file: {"best": <int>}.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def best(self) -> int:
        try:
            data = read_json(self.path)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if not isinstance(data, dict):
            return 0
        v = data.get("best", 0)
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            logger.warning("ignoring invalid high score %r in %s", v, self.path)
            return 0
        return int(v)

    def submit(self, score: int) -> bool:
        """
        Record `score` if it beats the stored best. Returns True when a new record was written.
        """
        if int(score) <= self.best():
            return False
        write_json(self.path, {"best": int(score)})
        logger.info("new high score: %d", int(score))
        return True


__all__ = ["HighScoreStore"]
