"""Pure Python LZ77 sliding-window compression.

LZ77 replaces repeated byte sequences with references to an earlier
occurrence inside a bounded history window. Each step emits one token:

    (offset, length, next_byte)

Usage::

    from lz77 import compress, decompress

    tokens = compress(b"aaaa", dictionary_size=3, buffer_size=3)
    # [Token(offset=0, length=0, next_byte=97), Token(offset=1, length=3, next_byte=None)]

    original = decompress(tokens)

Reference: Ziv & Lempel, "A Universal Algorithm for Sequential Data
Compression", IEEE Transactions on Information Theory, 1977.
"""

from __future__ import annotations

from .compress import compress, compress_with_config, iter_tokens
from .config import CompressorConfig
from .decompress import decompress
from .encoding import pack_tokens, unpack_tokens
from .exceptions import (
    CompressionError,
    DecompressionError,
    EmptyInputError,
    EncodingError,
    InvalidCapacityError,
    LZ77Error,
)
from .render import render_token, render_tokens
from .token import Token

__all__ = [
    # Core API
    "compress",
    "compress_with_config",
    "iter_tokens",
    "decompress",
    # Types
    "Token",
    "CompressorConfig",
    # Packing and display
    "pack_tokens",
    "unpack_tokens",
    "render_token",
    "render_tokens",
    # Exceptions
    "LZ77Error",
    "CompressionError",
    "EmptyInputError",
    "InvalidCapacityError",
    "DecompressionError",
    "EncodingError",
]
