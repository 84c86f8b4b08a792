"""
Constants for the LZ77 sliding-window compressor.

Reference: Ziv & Lempel, "A Universal Algorithm for Sequential Data
Compression", IEEE Transactions on Information Theory, 1977.
"""

from __future__ import annotations

from typing import Final

# ===========================================================================
# Scan State
# ===========================================================================
#
# The cursor points at the last byte already described by emitted tokens.
# Before the first token nothing has been consumed, so it sits one position
# before the start of input.

INITIAL_CURSOR: Final = -1
"""Cursor value before any token has been produced."""

NO_MATCH_OFFSET: Final = 0
"""Offset of a token whose lookahead did not match the dictionary."""

NO_MATCH_LENGTH: Final = 0
"""Length of a token whose lookahead did not match the dictionary."""

# ===========================================================================
# Byte Range
# ===========================================================================

MIN_BYTE: Final = 0
"""Smallest valid trailing byte value."""

MAX_BYTE: Final = 255
"""Largest valid trailing byte value."""

# ===========================================================================
# Default Capacities
# ===========================================================================
#
# Classic LZ77 parameters: a 4 KB history and an 18 byte lookahead.
# Only the CLI falls back to these; the library always takes them explicitly.

DEFAULT_DICTIONARY_SIZE: Final = 4096
"""Default number of history bytes a match may reach back into."""

DEFAULT_BUFFER_SIZE: Final = 18
"""Default number of unseen bytes a match may extend over."""

# ===========================================================================
# Presentation
# ===========================================================================

NONE_MARKER: Final = "NONE"
"""Rendered in place of the trailing byte when a match reaches end of input."""

# ===========================================================================
# Token Packing
# ===========================================================================
#
# Packed tokens store offset and length as varints followed by a flag byte
# that says whether a trailing byte follows.

FLAG_NO_BYTE: Final = 0x00
"""Flag: the token has no trailing byte."""

FLAG_HAS_BYTE: Final = 0x01
"""Flag: one trailing byte follows the flag."""

MAX_VARINT_LENGTH: Final = 5
"""Maximum bytes needed for a 32-bit varint (7 data bits per byte)."""

VARINT_CONTINUATION_BIT: Final = 0x80
"""High bit set in varint bytes to indicate more bytes follow."""

VARINT_DATA_MASK: Final = 0x7F
"""Mask to extract the 7 data bits from a varint byte."""

MAX_VARINT_VALUE: Final = (1 << 32) - 1
"""Largest value a 32-bit varint can carry."""
