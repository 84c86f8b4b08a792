"""Exception hierarchy for the LZ77 compressor."""

from __future__ import annotations


class LZ77Error(Exception):
    """
    Base exception for all LZ77-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class CompressionError(LZ77Error):
    """
    Base class for errors detected before compression starts.

    Raised only by upfront validation. Once inputs are accepted the
    search is total and never fails.
    """


class EmptyInputError(CompressionError):
    """Raised when the input to compress has no bytes."""

    def __init__(self) -> None:
        super().__init__("input cannot be empty")


class InvalidCapacityError(CompressionError):
    """
    Raised when a window capacity is not a positive integer.

    Attributes:
        name: Which capacity was rejected ("dictionary_size" or "buffer_size").
        value: The rejected value.
    """

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"capacity cannot be less than or equal to 0: {name}={value}")


class DecompressionError(LZ77Error):
    """
    Raised when a token sequence cannot be decoded.

    Attributes:
        index: Position of the offending token in the sequence (if known).
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"{message} (token {index})"
        super().__init__(message)


class EncodingError(LZ77Error):
    """
    Raised when packed token data is truncated or malformed.

    Attributes:
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(self, detail: str, *, offset: int | None = None) -> None:
        self.offset = offset
        msg = f"Failed to unpack tokens: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"
        super().__init__(msg)
