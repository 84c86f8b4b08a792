"""Test helpers for lz77 unit tests."""

from __future__ import annotations

from lz77 import Token


def cursor_trace(tokens: list[Token]) -> list[int]:
    """Replay the cursor positions visited while producing the tokens."""
    cursors = [-1]
    for token in tokens:
        cursors.append(cursors[-1] + token.span)
    return cursors


__all__ = ["cursor_trace"]
