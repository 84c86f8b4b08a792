"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

# Capacities must come from the CLI arguments or built-in defaults in tests.
os.environ.pop("LZ77_DICTIONARY_SIZE", None)
os.environ.pop("LZ77_BUFFER_SIZE", None)

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
