"""Tests for the compression driver."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from lz77 import (
    CompressionError,
    CompressorConfig,
    EmptyInputError,
    InvalidCapacityError,
    Token,
    compress,
    compress_with_config,
    decompress,
    iter_tokens,
)

Triples = Callable[[list[Token]], list[tuple[int, int, int | None]]]
Trace = Callable[[list[Token]], list[int]]

A, B, C, X = ord("a"), ord("b"), ord("c"), ord("x")


class TestScenarios:
    """Known inputs with hand-checked token sequences."""

    def test_run_of_one_byte(self, triples: Triples) -> None:
        """A run is a literal followed by one self-referencing copy."""
        tokens = compress(b"aaaa", 3, 3)
        assert triples(tokens) == [(0, 0, A), (1, 3, None)]
        assert decompress(tokens) == b"aaaa"

    @pytest.mark.parametrize("dictionary_size,buffer_size", [(1, 1), (3, 3), (100, 1), (1, 100)])
    def test_single_byte(self, triples: Triples, dictionary_size: int, buffer_size: int) -> None:
        """One byte of input is a single literal."""
        assert triples(compress(b"a", dictionary_size, buffer_size)) == [(0, 0, A)]

    def test_no_repetition_degenerates_to_literals(self, triples: Triples) -> None:
        """Without repeats every token is a raw byte."""
        tokens = compress(b"abc", 2, 2)
        assert triples(tokens) == [(0, 0, A), (0, 0, B), (0, 0, C)]
        assert all(token.offset == 0 and token.length == 0 for token in tokens)

    def test_alternating_run(self, triples: Triples) -> None:
        """Two literals seed a tiled copy of the pair."""
        tokens = compress(b"abababa", 8, 8)
        assert triples(tokens) == [(0, 0, A), (0, 0, B), (2, 5, None)]

    def test_run_split_by_buffer_size(self, triples: Triples) -> None:
        """A short lookahead splits a run, and ties pick the farthest start."""
        tokens = compress(b"aaaaaa", 3, 2)
        assert triples(tokens) == [(0, 0, A), (1, 2, A), (3, 2, None)]
        assert decompress(tokens) == b"aaaaaa"

    def test_copy_followed_by_byte(self, triples: Triples) -> None:
        """A copy that stops before the end carries the next byte."""
        tokens = compress(b"abcabx", 8, 8)
        assert triples(tokens) == [(0, 0, A), (0, 0, B), (0, 0, C), (3, 2, X)]

    def test_nul_bytes_are_data(self, triples: Triples) -> None:
        """A NUL byte is a real trailing byte, distinct from the absent marker."""
        tokens = compress(b"\x00\x00\x00", 4, 4)
        assert triples(tokens) == [(0, 0, 0), (1, 2, None)]
        assert decompress(tokens) == b"\x00\x00\x00"

    def test_bytes_like_inputs(self) -> None:
        """bytearray and memoryview are accepted like bytes."""
        expected = compress(b"abab", 4, 4)
        assert compress(bytearray(b"abab"), 4, 4) == expected
        assert compress(memoryview(b"abab"), 4, 4) == expected


class TestBoundaries:
    """Where the scan stops and how the last token looks."""

    def test_last_token_without_byte_ends_at_last_index(self, trace: Trace) -> None:
        """A copy reaching the end of input has no trailing byte."""
        tokens = compress(b"abcab", 8, 8)
        assert tokens[-1].next_byte is None
        assert trace(tokens)[-1] == 4

    def test_last_token_with_byte(self, trace: Trace) -> None:
        """A copy stopping one short of the end carries the final byte."""
        tokens = compress(b"abcabd", 8, 8)
        assert tokens[-1].next_byte == ord("d")
        assert trace(tokens)[-1] == 5

    def test_cursor_strictly_increases(self, trace: Trace) -> None:
        """Every token consumes at least one byte."""
        cursors = trace(compress(b"mississippi river", 6, 4))
        assert all(a < b for a, b in zip(cursors, cursors[1:], strict=False))
        assert cursors[-1] == len(b"mississippi river") - 1

    def test_offsets_within_dictionary(self) -> None:
        """No copy reaches further back than the dictionary allows."""
        data = b"the quick brown fox jumps over the lazy dog the end"
        for token in compress(data, 5, 3):
            assert token.offset <= 5
            assert token.length <= 3


class TestValidation:
    """Inputs rejected before any token is produced."""

    def test_empty_input(self) -> None:
        """Empty input is rejected."""
        with pytest.raises(EmptyInputError, match="input cannot be empty"):
            compress(b"", 3, 3)

    @pytest.mark.parametrize(
        "dictionary_size,buffer_size,name",
        [(0, 3, "dictionary_size"), (-1, 3, "dictionary_size"), (3, 0, "buffer_size"), (3, -5, "buffer_size")],
    )
    def test_non_positive_capacity(self, dictionary_size: int, buffer_size: int, name: str) -> None:
        """Capacities must be positive."""
        with pytest.raises(InvalidCapacityError, match="less than or equal to 0") as exc_info:
            compress(b"abc", dictionary_size, buffer_size)
        assert exc_info.value.name == name

    def test_errors_share_base_class(self) -> None:
        """Both validation errors are compression errors."""
        assert issubclass(EmptyInputError, CompressionError)
        assert issubclass(InvalidCapacityError, CompressionError)

    def test_text_input_rejected(self) -> None:
        """Text must be encoded by the caller."""
        with pytest.raises(TypeError, match="bytes-like"):
            compress("abc", 3, 3)  # type: ignore[arg-type]

    @pytest.mark.parametrize("capacity", [True, 2.0, "3"])
    def test_non_int_capacity_rejected(self, capacity: object) -> None:
        """Capacities must be plain integers."""
        with pytest.raises(TypeError, match="must be an int"):
            compress(b"abc", capacity, 3)  # type: ignore[arg-type]

    def test_iter_tokens_validates_eagerly(self) -> None:
        """Validation fails at the call, not on first iteration."""
        with pytest.raises(EmptyInputError):
            iter_tokens(b"", 3, 3)
        with pytest.raises(InvalidCapacityError):
            iter_tokens(b"abc", 3, 0)


class TestIterTokens:
    """Lazy token production."""

    def test_matches_compress(self) -> None:
        """The iterator yields the same tokens as compress."""
        data = b"abracadabra abracadabra"
        assert list(iter_tokens(data, 8, 6)) == compress(data, 8, 6)

    def test_lazy(self) -> None:
        """Tokens are produced on demand."""
        tokens = iter_tokens(b"abc", 2, 2)
        assert next(tokens).as_tuple() == (0, 0, A)


class TestConfig:
    """Compression driven by a configuration object."""

    def test_compress_with_config(self) -> None:
        """The config's capacities are used."""
        config = CompressorConfig(dictionary_size=3, buffer_size=3)
        assert compress_with_config(b"aaaa", config) == compress(b"aaaa", 3, 3)

    def test_config_capacity_checked_at_compress(self) -> None:
        """A config with a zero capacity fails with the capacity error."""
        config = CompressorConfig(dictionary_size=0, buffer_size=3)
        with pytest.raises(InvalidCapacityError):
            compress_with_config(b"aaaa", config)


class TestLogging:
    """Debug tracing of the scan."""

    def test_debug_trace(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each token and the summary are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="lz77"):
            compress(b"aaaa", 3, 3)

        messages = [record.getMessage() for record in caplog.records]
        assert "cursor=-1 -> (0, 0, 97)" in messages
        assert "cursor=0 -> (1, 3, None)" in messages
        assert any("into 2 tokens" in message for message in messages)

    def test_quiet_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """Nothing is logged at info level or above."""
        with caplog.at_level(logging.INFO, logger="lz77"):
            compress(b"abcabc", 3, 3)
        assert caplog.records == []
