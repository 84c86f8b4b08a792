"""
Sliding window state.

The window splits the input around a cursor:

    [ ... dictionary ... ] cursor | [ ... lookahead ... ]

- The dictionary holds up to `dictionary_size` bytes already described
  by emitted tokens, ending at the cursor (inclusive).
- The lookahead holds up to `buffer_size` bytes that come next.

Both ranges are inclusive index pairs into the input and may be empty.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import INITIAL_CURSOR


@dataclass(slots=True)
class Window:
    """Cursor position and the dictionary and lookahead ranges it induces."""

    data: bytes
    """The full input being compressed."""

    dictionary_size: int
    """Maximum number of history bytes a match may reach back into."""

    buffer_size: int
    """Maximum number of unseen bytes a match may cover."""

    cursor: int = INITIAL_CURSOR
    """Index of the last byte already described by emitted tokens."""

    @property
    def last_index(self) -> int:
        """Index of the final input byte."""
        return len(self.data) - 1

    @property
    def dictionary_start(self) -> int:
        """First index of the dictionary, clamped to the start of input."""
        return max(0, self.cursor - self.dictionary_size + 1)

    @property
    def dictionary_end(self) -> int:
        """Last index of the dictionary (the cursor itself)."""
        return self.cursor

    @property
    def lookahead_start(self) -> int:
        """First index of the lookahead buffer."""
        return self.cursor + 1

    @property
    def lookahead_end(self) -> int:
        """Last index of the lookahead buffer, clamped to the end of input."""
        return min(self.cursor + self.buffer_size, self.last_index)

    def dictionary_indices(self) -> range:
        """Candidate match start positions, oldest first."""
        return range(self.dictionary_start, self.dictionary_end + 1)

    def lookahead_indices(self) -> range:
        """Candidate match end positions, nearest first."""
        return range(self.lookahead_start, self.lookahead_end + 1)

    @property
    def is_exhausted(self) -> bool:
        """True once every input byte has been described."""
        return self.cursor >= self.last_index

    def advance(self, step: int) -> None:
        """
        Move the cursor forward past the bytes a token consumed.

        Raises:
            ValueError: If the step would stall the scan or overrun the input.
        """
        if step < 1:
            raise ValueError(f"Cursor must advance by at least 1, got {step}")
        if self.cursor + step > self.last_index:
            raise ValueError(
                f"Cursor {self.cursor} cannot advance by {step} past last index {self.last_index}"
            )
        self.cursor += step
