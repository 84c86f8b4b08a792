"""
Binary packing of token sequences.

Tokens are small integers, so they are stored as varints:

    [varint: token count] [token 1] [token 2] ...

Each token:

    [varint: offset] [varint: length] [flag] [byte?]

- flag 0x00: no trailing byte (the token reached end of input).
- flag 0x01: one trailing byte follows.

Using a flag rather than a reserved byte value keeps NUL bytes
unambiguous in binary input.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

from .constants import (
    FLAG_HAS_BYTE,
    FLAG_NO_BYTE,
    MAX_VARINT_LENGTH,
    MAX_VARINT_VALUE,
    VARINT_CONTINUATION_BIT,
    VARINT_DATA_MASK,
)
from .exceptions import EncodingError
from .token import Token

# Varint Encoding
#
# Each byte has 8 bits:
#   - Bit 7 (high): continuation flag.
#       - 1 = more bytes follow,
#       - 0 = this is the last byte.
#   - Bits 0-6 (low): 7 bits of the integer value.
#
# Bytes are emitted least-significant chunk first.
#
# Example: encoding 300
#
#   300 in binary: 100101100 (9 bits, needs 2 chunks of 7 bits)
#
#   Chunk 1 (bits 0-6): 0101100 = 44. More bits remain, so continuation = 1.
#       Byte 1 = 0x80 | 44 = 0xAC
#
#   Chunk 2 (bits 7+): 0000010 = 2. No more bits, so continuation = 0.
#       Byte 2 = 0x00 | 2 = 0x02
#
#   Encoded: [0xAC, 0x02]


def encode_varint32(value: int) -> bytes:
    """Encode a 32-bit unsigned integer as a varint.

    Args:
        value: Non-negative integer to encode (must fit in 32 bits).

    Returns:
        Variable-length bytes encoding the integer (1-5 bytes).

    Raises:
        ValueError: If value is negative or exceeds 32 bits.
    """
    if value < 0:
        raise ValueError(f"Varint value must be non-negative, got {value}")
    if value > MAX_VARINT_VALUE:
        raise ValueError(f"Varint value exceeds 32 bits: {value}")

    result: list[int] = []
    while True:
        byte = value & VARINT_DATA_MASK
        value >>= 7
        if value != 0:
            byte |= VARINT_CONTINUATION_BIT
        result.append(byte)
        if value == 0:
            break

    return bytes(result)


def decode_varint32(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a varint from a byte sequence at the given offset.

    Returns:
        Tuple of (decoded_value, bytes_consumed).

    Raises:
        ValueError: If the varint is truncated, too long, or exceeds 32 bits.
    """
    result = 0
    shift = 0
    bytes_read = 0

    while True:
        if offset + bytes_read >= len(data):
            raise ValueError("Truncated varint: unexpected end of data")

        byte = data[offset + bytes_read]
        bytes_read += 1

        result |= (byte & VARINT_DATA_MASK) << shift
        shift += 7

        if (byte & VARINT_CONTINUATION_BIT) == 0:
            break

        if bytes_read >= MAX_VARINT_LENGTH:
            raise ValueError(f"Varint too long: exceeds {MAX_VARINT_LENGTH} bytes")

    if result > MAX_VARINT_VALUE:
        raise ValueError(f"Varint overflow: {result} exceeds 32 bits")

    return result, bytes_read


def pack_tokens(tokens: Sequence[Token]) -> bytes:
    """Serialize tokens into their compact binary form.

    Raises:
        ValueError: If an offset or length does not fit in 32 bits.
    """
    output = bytearray(encode_varint32(len(tokens)))
    for token in tokens:
        output.extend(encode_varint32(token.offset))
        output.extend(encode_varint32(token.length))
        if token.next_byte is None:
            output.append(FLAG_NO_BYTE)
        else:
            output.append(FLAG_HAS_BYTE)
            output.append(token.next_byte)
    return bytes(output)


def unpack_tokens(data: bytes) -> list[Token]:
    """Parse tokens from their binary form.

    Raises:
        EncodingError: If the data is truncated, carries an unknown flag,
            or has bytes left over after the last token.
    """
    count, pos = _read_varint(data, 0)

    tokens: list[Token] = []
    for _ in range(count):
        offset, pos = _read_varint(data, pos)
        length, pos = _read_varint(data, pos)

        if pos >= len(data):
            raise EncodingError("missing trailing byte flag", offset=pos)
        flag = data[pos]
        pos += 1

        if flag == FLAG_NO_BYTE:
            next_byte = None
        elif flag == FLAG_HAS_BYTE:
            if pos >= len(data):
                raise EncodingError("missing trailing byte", offset=pos)
            next_byte = data[pos]
            pos += 1
        else:
            raise EncodingError(f"unknown trailing byte flag {flag:#04x}", offset=pos - 1)

        try:
            tokens.append(Token(offset=offset, length=length, next_byte=next_byte))
        except ValidationError as e:
            raise EncodingError(f"invalid token: {e}", offset=pos) from e

    if pos != len(data):
        raise EncodingError(f"{len(data) - pos} trailing bytes after last token", offset=pos)

    return tokens


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    """Decode a varint and return (value, position after it)."""
    try:
        value, consumed = decode_varint32(data, pos)
    except ValueError as e:
        raise EncodingError(str(e), offset=pos) from e
    return value, pos + consumed
