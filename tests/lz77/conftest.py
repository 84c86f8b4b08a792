"""
Shared pytest fixtures for the lz77 tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from lz77 import Token
from tests.lz77.helpers import cursor_trace


@pytest.fixture
def trace() -> Callable[[list[Token]], list[int]]:
    """Cursor replay helper."""
    return cursor_trace


@pytest.fixture
def triples() -> Callable[[list[Token]], list[tuple[int, int, int | None]]]:
    """Convert tokens to plain (offset, length, next_byte) triples."""

    def _convert(tokens: list[Token]) -> list[tuple[int, int, int | None]]:
        return [token.as_tuple() for token in tokens]

    return _convert
