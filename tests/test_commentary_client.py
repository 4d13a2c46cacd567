# tests/test_commentary_client.py
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List, Optional

import pytest

from tetris_heckler.commentary.client import CommentaryClient
from tetris_heckler.commentary.prompt import SYSTEM_INSTRUCTION, build_prompt, infer_mood
from tetris_heckler.commentary.types import GLITCH_COMMENTARY, MISSING_KEY_COMMENTARY
from tetris_heckler.config.root import CommentaryConfig


class _FakeModels:
    def __init__(self, text: Optional[str] = "Nice stack.", error: Optional[Exception] = None) -> None:
        self.text = text
        self.error = error
        self.calls: List[dict[str, Any]] = []

    def generate_content(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _client(models: _FakeModels) -> CommentaryClient:
    return CommentaryClient(api_key=None, backend=SimpleNamespace(models=models))


def _ask(c: CommentaryClient, event: str = "LINE_CLEAR"):
    return c.comment(event=event, board_snapshot="..........\nX.........", score=120, lines=3)


def test_missing_key_returns_fixed_fallback() -> None:
    c = CommentaryClient.from_config(CommentaryConfig(), environ={})
    assert not c.available
    assert _ask(c) == MISSING_KEY_COMMENTARY
    assert MISSING_KEY_COMMENTARY.mood == "neutral"


def test_request_carries_prompt_and_generation_settings() -> None:
    models = _FakeModels()
    out = _ask(_client(models), event="TETRIS")

    assert out.text == "Nice stack."
    assert out.mood == "encouraging"
    (call,) = models.calls
    assert call["model"] == "gemini-3-flash-preview"
    assert "Event Trigger: TETRIS" in call["contents"]
    assert "Current Score: 120" in call["contents"]
    assert "Lines Cleared: 3" in call["contents"]
    assert "X........." in call["contents"]
    assert call["config"].system_instruction == SYSTEM_INSTRUCTION
    assert call["config"].temperature == pytest.approx(0.8)
    assert call["config"].max_output_tokens == 50


def test_request_failure_returns_glitch() -> None:
    c = _client(_FakeModels(error=RuntimeError("quota")))
    assert _ask(c) == GLITCH_COMMENTARY


def test_empty_reply_becomes_ellipsis() -> None:
    out = _ask(_client(_FakeModels(text=None)))
    assert out.text == "..."
    assert out.mood == "neutral"


@pytest.mark.parametrize(
    "event,text,mood",
    [
        ("GAME_OVER", "Oops, that was a mess.", "roasting"),
        ("TETRIS", "what a mess", "encouraging"),
        ("LINE_CLEAR", "OOPS.", "sarcastic"),
        ("INTERVAL", "This is a Mess.", "sarcastic"),
        ("INTERVAL", "Keep going.", "neutral"),
    ],
)
def test_infer_mood(event: str, text: str, mood: str) -> None:
    assert infer_mood(event=event, text=text) == mood


def test_build_prompt_layout() -> None:
    p = build_prompt(event="GAME_OVER", board_snapshot="X", score=7, lines=1)
    assert p.splitlines()[0] == "Event Trigger: GAME_OVER"
    assert p.endswith("Generate a short comment.")
