"""
LZ77 compression driver.

This module validates the inputs and runs the scan loop:

    cursor = -1
    while cursor < N - 1:
        token = longest_match(window)
        emit token
        cursor += bytes the token describes


Example:
-------
Input: "aaaa", dictionary_size = 3, buffer_size = 3

  cursor = -1: dictionary empty, lookahead "aaa"
      No match. Emit literal (0, 0, 'a'). cursor -> 0.

  cursor = 0: dictionary "a", lookahead "aaa"
      "a" tiled to "aaa" matches. The match reaches end of input.
      Emit (1, 3, None). cursor -> 3.

Output: [(0, 0, 'a'), (1, 3, None)]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .config import CompressorConfig
from .exceptions import EmptyInputError, InvalidCapacityError
from .match import longest_match
from .token import Token, TokenStream
from .window import Window

logger = logging.getLogger(__name__)


def compress(data: bytes, dictionary_size: int, buffer_size: int) -> list[Token]:
    """Compress data into a sequence of LZ77 tokens.

    Args:
        data: Input bytes. Must be non-empty.
        dictionary_size: How many already-seen bytes a match may reach back into.
        buffer_size: How many unseen bytes a match may cover.

    Returns:
        Tokens in decode order.

    Raises:
        EmptyInputError: If the input has no bytes.
        InvalidCapacityError: If either capacity is not positive.
        TypeError: If the input is not bytes-like or a capacity is not an int.
    """
    stream = TokenStream()
    for token in iter_tokens(data, dictionary_size, buffer_size):
        stream.append(token)

    logger.debug(
        "Compressed %d bytes into %d tokens (dictionary_size=%d, buffer_size=%d)",
        len(data),
        len(stream),
        dictionary_size,
        buffer_size,
    )
    return stream.to_list()


def compress_with_config(data: bytes, config: CompressorConfig) -> list[Token]:
    """Compress data using the capacities held by a configuration object."""
    return compress(data, config.dictionary_size, config.buffer_size)


def iter_tokens(data: bytes, dictionary_size: int, buffer_size: int) -> Iterator[Token]:
    """Yield LZ77 tokens one at a time.

    Validation runs immediately, before the iterator is returned,
    so invalid inputs fail at the call site rather than on first use.

    Raises:
        EmptyInputError: If the input has no bytes.
        InvalidCapacityError: If either capacity is not positive.
        TypeError: If the input is not bytes-like or a capacity is not an int.
    """
    window = Window(
        data=_validate_input(data),
        dictionary_size=_validate_capacity("dictionary_size", dictionary_size),
        buffer_size=_validate_capacity("buffer_size", buffer_size),
    )
    return _scan(window)


def _scan(window: Window) -> Iterator[Token]:
    """Run the main loop until every byte of the window's input is described."""
    while not window.is_exhausted:
        token = longest_match(window)
        logger.debug("cursor=%d -> %s", window.cursor, token.as_tuple())
        yield token

        # The trailing byte is only consumed when there is one.
        #
        # A match that runs to the end of input leaves the cursor on the last byte.
        window.advance(token.span)


def _validate_input(data: bytes) -> bytes:
    """Normalize bytes-like input to bytes and reject empty input."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like input, got {type(data).__name__}")

    data = bytes(data)
    if not data:
        raise EmptyInputError()
    return data


def _validate_capacity(name: str, value: int) -> int:
    """Reject capacities that are not positive integers."""
    # bool is a subclass of int but never a meaningful capacity.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidCapacityError(name, value)
    return value
