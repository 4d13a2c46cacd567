# src/tetris_heckler/commentary/prompt.py
from __future__ import annotations

from tetris_heckler.commentary.types import EVENT_GAME_OVER, EVENT_TETRIS, Mood

SYSTEM_INSTRUCTION = """\
You are a sarcastic, witty, and sometimes helpful Tetris coach/heckler.
Your goal is to comment on the player's performance in a video game.
Keep comments short (under 20 words).
If the board is high (near the top), panic or mock them.
If they score a Tetris (4 lines), be impressed or jealous.
If they Game Over, roast them gently.
The board is provided as a grid where '.' is empty and 'X' is a block.
"""

SARCASM_MARKERS: tuple[str, ...] = ("oops", "mess")


def build_prompt(*, event: str, board_snapshot: str, score: int, lines: int) -> str:
    return (
        f"Event Trigger: {event}\n"
        f"Current Score: {int(score)}\n"
        f"Lines Cleared: {int(lines)}\n"
        f"Board State:\n"
        f"{board_snapshot}\n"
        f"\n"
        f"Generate a short comment."
    )


def infer_mood(*, event: str, text: str) -> Mood:
    """
    UI tint for a comment: driven by the event first, then by a crude keyword scan.
    """
    if event == EVENT_GAME_OVER:
        return "roasting"
    if event == EVENT_TETRIS:
        return "encouraging"
    lowered = text.lower()
    if any(m in lowered for m in SARCASM_MARKERS):
        return "sarcastic"
    return "neutral"


__all__ = ["SARCASM_MARKERS", "SYSTEM_INSTRUCTION", "build_prompt", "infer_mood"]
