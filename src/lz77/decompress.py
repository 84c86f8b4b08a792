"""
LZ77 decompression.

Decoding replays the tokens in order against a growing output buffer:

  1. If length > 0, go back `offset` bytes from the end of the output
     and copy `length` bytes.
  2. If the token carries a trailing byte, append it.


OVERLAPPING COPIES
------------------
When length > offset, the copy reads bytes it is writing itself.

Example: output = "a", token = (1, 3, None)

    src_pos = 1 - 1 = 0
    Copy 1: append output[0] = 'a' -> "aa"
    Copy 2: append output[1] = 'a' -> "aaa"
    Copy 3: append output[2] = 'a' -> "aaaa"

This mirrors the tiling the compressor uses when matching.
"""

from __future__ import annotations

from collections.abc import Iterable

from .constants import NO_MATCH_OFFSET
from .exceptions import DecompressionError
from .token import Token


def decompress(tokens: Iterable[Token]) -> bytes:
    """Rebuild the original bytes from a token sequence.

    Args:
        tokens: Tokens in the order the compressor produced them.

    Returns:
        The decoded bytes.

    Raises:
        DecompressionError: If a token references bytes before the start of
            the output, or a token without a trailing byte is not the last one.
    """
    output = bytearray()
    ended = False

    for index, token in enumerate(tokens):
        # Only the final token may stop short of a trailing byte.
        if ended:
            raise DecompressionError("Token follows a token that reached end of input", index=index)

        if token.is_match:
            _execute_copy(output, token.offset, token.length, index)
        elif token.offset != NO_MATCH_OFFSET:
            raise DecompressionError(
                f"Token has offset {token.offset} but copies nothing", index=index
            )

        if token.next_byte is None:
            ended = True
        else:
            output.append(token.next_byte)

    return bytes(output)


def _execute_copy(output: bytearray, offset: int, length: int, index: int) -> None:
    """Append `length` bytes read from `offset` bytes back in the output.

    Args:
        output: The output buffer (modified in place).
        offset: How many bytes back to start copying from.
        length: How many bytes to copy.
        index: Position of the token, for error reporting.

    Raises:
        DecompressionError: If the offset is zero or reaches before the buffer.
    """
    if offset < 1:
        raise DecompressionError(f"Copy of {length} bytes has no offset", index=index)
    if offset > len(output):
        raise DecompressionError(
            f"Copy offset {offset} exceeds output buffer size {len(output)}", index=index
        )

    # Byte-by-byte, so the source may run into bytes written by this same copy.
    src_pos = len(output) - offset
    for _ in range(length):
        output.append(output[src_pos])
        src_pos += 1
