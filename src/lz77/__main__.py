"""
LZ77 compressor CLI entry point.

Compress a string and print the resulting tokens.

Usage::

    python -m lz77 aaaa 3 3
    python -m lz77 "abracadabra" 8 4 --decode-check
    python -m lz77 "abcabcabc" --packed -v

Arguments:
    text                 Text to compress (encoded as UTF-8)
    dictionary_size      Dictionary capacity (default: $LZ77_DICTIONARY_SIZE or 4096)
    buffer_size          Lookahead capacity (default: $LZ77_BUFFER_SIZE or 18)

Options:
    --decode-check       Decode the tokens and check they reproduce the input
    --packed             Also print the packed token stream as hex
    -v, --verbose        Enable debug logging (one line per token)
    --no-color           Disable colored logging output
"""

from __future__ import annotations

import argparse
import logging
import sys

from lz77.compress import compress
from lz77.config import ENV_BUFFER_SIZE, ENV_DICTIONARY_SIZE
from lz77.decompress import decompress
from lz77.encoding import pack_tokens
from lz77.exceptions import CompressionError
from lz77.render import render_tokens

logger = logging.getLogger(__name__)

EXIT_OK = 0
"""Process exit code on success."""

EXIT_INVALID_INPUT = 1
"""Process exit code when the input or a capacity is rejected."""

EXIT_ROUNDTRIP_MISMATCH = 3
"""Process exit code when decoding does not reproduce the input."""


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="lz77",
        description="LZ77 sliding-window compressor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("text", help="Text to compress (encoded as UTF-8)")
    parser.add_argument(
        "dictionary_size",
        nargs="?",
        type=int,
        default=ENV_DICTIONARY_SIZE,
        help=f"Dictionary capacity (default: {ENV_DICTIONARY_SIZE})",
    )
    parser.add_argument(
        "buffer_size",
        nargs="?",
        type=int,
        default=ENV_BUFFER_SIZE,
        help=f"Lookahead capacity (default: {ENV_BUFFER_SIZE})",
    )
    parser.add_argument(
        "--decode-check",
        action="store_true",
        help="Decode the tokens and check they reproduce the input",
    )
    parser.add_argument(
        "--packed",
        action="store_true",
        help="Also print the packed token stream as hex",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    return parser


def run(
    text: str,
    dictionary_size: int,
    buffer_size: int,
    decode_check: bool = False,
    packed: bool = False,
) -> int:
    """
    Compress text and print the tokens to stdout.

    Returns:
        The process exit code.
    """
    data = text.encode("utf-8")

    try:
        tokens = compress(data, dictionary_size, buffer_size)
    except CompressionError as e:
        logger.error("LZ77 %s", e.message)
        return EXIT_INVALID_INPUT

    print("LZ77 COMPRESSED RESULT:")
    print(render_tokens(tokens))

    if packed:
        print(pack_tokens(tokens).hex())

    if decode_check:
        decoded = decompress(tokens)
        if decoded == data:
            logger.info("Round-trip OK: %d bytes from %d tokens", len(data), len(tokens))
        else:
            logger.error("Round-trip mismatch: decoded %r, expected %r", decoded, data)
            return EXIT_ROUNDTRIP_MISMATCH

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    return run(
        args.text,
        args.dictionary_size,
        args.buffer_size,
        decode_check=args.decode_check,
        packed=args.packed,
    )


if __name__ == "__main__":
    sys.exit(main())
