"""
Runtime configuration for the LZ77 compressor.

Environment defaults are read once at import:

- LZ77_DICTIONARY_SIZE: dictionary capacity used when none is given.
- LZ77_BUFFER_SIZE: lookahead capacity used when none is given.
"""

from __future__ import annotations

import os

from .base import StrictBaseModel
from .constants import DEFAULT_BUFFER_SIZE, DEFAULT_DICTIONARY_SIZE


def _int_from_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to a default."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(
            f"Invalid {name} environment variable: '{raw}'. Expected an integer."
        ) from e


ENV_DICTIONARY_SIZE = _int_from_env("LZ77_DICTIONARY_SIZE", DEFAULT_DICTIONARY_SIZE)
"""Dictionary capacity from the environment, or the built-in default."""

ENV_BUFFER_SIZE = _int_from_env("LZ77_BUFFER_SIZE", DEFAULT_BUFFER_SIZE)
"""Lookahead capacity from the environment, or the built-in default."""


class CompressorConfig(StrictBaseModel):
    """
    Window capacities for one compression run.

    Positivity is checked by the compressor, not here, so a bad value
    always surfaces as InvalidCapacityError.
    """

    dictionary_size: int = ENV_DICTIONARY_SIZE
    """Maximum number of history bytes a match may reach back into."""

    buffer_size: int = ENV_BUFFER_SIZE
    """Maximum number of unseen bytes a match may cover."""
