"""
Tokens produced by the compressor.

Each compression step emits one token:

    (offset, length, next_byte)

- offset:    how far back from the end of the dictionary the copy starts.
- length:    how many lookahead bytes the copy covers.
- next_byte: the literal byte following the copy, or None at end of input.

A token with offset 0 and length 0 is a plain literal.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Annotated

from pydantic import Field

from .base import StrictBaseModel
from .constants import MAX_BYTE, MIN_BYTE, NO_MATCH_LENGTH, NO_MATCH_OFFSET

ByteValue = Annotated[int, Field(ge=MIN_BYTE, le=MAX_BYTE)]
"""A single byte value in [0, 255]."""


class Token(StrictBaseModel):
    """One (offset, length, next_byte) step of the compressed stream."""

    offset: int = Field(ge=0)
    """Distance back from the dictionary end to the copy source. 0 means no copy."""

    length: int = Field(ge=0)
    """Number of lookahead bytes described by the copy. 0 means no copy."""

    next_byte: ByteValue | None = None
    """Byte following the copied span, or None when the copy reaches end of input."""

    @classmethod
    def literal(cls, next_byte: int | None) -> Token:
        """Build a token that copies nothing and carries a single byte."""
        return cls(offset=NO_MATCH_OFFSET, length=NO_MATCH_LENGTH, next_byte=next_byte)

    @property
    def is_match(self) -> bool:
        """True when the token copies bytes from the dictionary."""
        return self.length > 0

    @property
    def span(self) -> int:
        """
        Number of input bytes this token accounts for.

        This is the copied length plus one for the trailing byte, when present.
        """
        return self.length + (0 if self.next_byte is None else 1)

    def as_tuple(self) -> tuple[int, int, int | None]:
        """Return the token as a plain (offset, length, next_byte) triple."""
        return (self.offset, self.length, self.next_byte)


@dataclass(slots=True)
class TokenStream:
    """
    Append-only, ordered sequence of tokens.

    Insertion order is decode order. Tokens are never removed or reordered.
    """

    _tokens: list[Token] = field(default_factory=list)

    def append(self, token: Token) -> int:
        """
        Append a token to the end of the stream.

        Returns:
            The number of input bytes the token consumed.
        """
        self._tokens.append(token)
        return token.span

    def to_list(self) -> list[Token]:
        """Return a snapshot of the tokens in production order."""
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)
