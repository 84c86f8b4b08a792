"""Text rendering of token sequences."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import NONE_MARKER
from .token import Token


def render_byte(value: int | None) -> str:
    """
    Render a trailing byte for display.

    Printable ASCII is shown as the character itself, other bytes as a
    `\\xNN` escape, and a missing byte as the NONE marker.
    """
    if value is None:
        return NONE_MARKER
    char = chr(value)
    if char.isascii() and char.isprintable():
        return char
    return f"\\x{value:02x}"


def render_token(token: Token) -> str:
    """Render one token as `(offset,length,byte)`."""
    return f"({token.offset},{token.length},{render_byte(token.next_byte)})"


def render_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as space-separated triples in production order."""
    return " ".join(render_token(token) for token in tokens)
