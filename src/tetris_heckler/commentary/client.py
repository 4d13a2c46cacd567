# src/tetris_heckler/commentary/client.py
from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from google import genai
from google.genai import types as genai_types

from tetris_heckler.commentary.prompt import SYSTEM_INSTRUCTION, build_prompt, infer_mood
from tetris_heckler.commentary.types import GLITCH_COMMENTARY, MISSING_KEY_COMMENTARY, Commentary
from tetris_heckler.config.root import CommentaryConfig

logger = logging.getLogger(__name__)


class CommentaryClient:
    """
    Gemini-backed heckler.

    comment() never raises: a missing key or any request failure resolves to a fixed
    neutral fallback so the game loop is never interrupted.

    `backend` is anything exposing `models.generate_content(...)` (a genai.Client by
    default). It is built only when an API key is available.
    """

    def __init__(
            self,
            *,
            api_key: Optional[str],
            model: str = "gemini-3-flash-preview",
            temperature: float = 0.8,
            max_output_tokens: int = 50,
            backend: Any = None,
    ) -> None:
        self.model = str(model)
        self.temperature = float(temperature)
        self.max_output_tokens = int(max_output_tokens)

        if backend is None and api_key:
            backend = genai.Client(api_key=api_key)
        self._backend = backend

    @classmethod
    def from_config(cls, cfg: CommentaryConfig, *, environ: Optional[Mapping[str, str]] = None) -> "CommentaryClient":
        env = os.environ if environ is None else environ
        api_key = env.get(cfg.api_key_env) or None
        return cls(
            api_key=api_key,
            model=cfg.model,
            temperature=cfg.temperature,
            max_output_tokens=cfg.max_output_tokens,
        )

    @property
    def available(self) -> bool:
        return self._backend is not None

    def comment(self, *, event: str, board_snapshot: str, score: int, lines: int) -> Commentary:
        if self._backend is None:
            logger.warning("Gemini API key missing; using fallback commentary")
            return MISSING_KEY_COMMENTARY

        prompt = build_prompt(event=event, board_snapshot=board_snapshot, score=score, lines=lines)
        try:
            response = self._backend.models.generate_content(
                model=self.model,
                contents=prompt,
                config=genai_types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
            text = response.text or "..."
        except Exception as e:
            logger.warning("Gemini request failed (%s): %s", type(e).__name__, e)
            return GLITCH_COMMENTARY

        return Commentary(text=str(text), mood=infer_mood(event=event, text=str(text)))


__all__ = ["CommentaryClient"]
