"""
Longest-match search over the sliding window.

For the current cursor, every lookahead prefix is tried against every
dictionary suffix, and the longest agreement wins.


OVERLAPPING MATCHES
-------------------
A dictionary candidate always runs from its start position up to the
cursor. The lookahead prefix may be longer than that candidate.

In that case the candidate is repeated ("tiled") until it is long enough:

    dictionary:  ... a b | cursor
    candidate:   "ab"  (starts 2 back)
    lookahead:   "ababa"

    stretched:   "ab" + "ab" + "a" = "ababa"  -> match of length 5, offset 2

This is what lets a single byte of history encode a long run:

    input "aaaa", after emitting the first "a":
        candidate "a" stretched to "aaa" matches the remaining lookahead.


TIE-BREAKING
------------
Lookahead ends are tried in ascending order, dictionary starts in ascending
order, and a candidate replaces the best only when strictly longer.

Among equal-length matches the oldest start (largest offset) wins.
"""

from __future__ import annotations

from .token import Token
from .window import Window


def spans_equal(
    data: bytes,
    target_start: int,
    target_end: int,
    source_start: int,
    source_end: int,
) -> bool:
    """Compare a lookahead span against a dictionary span tiled to the same length.

    Args:
        data: The input being compressed.
        target_start: First index of the lookahead span (inclusive).
        target_end: Last index of the lookahead span (inclusive).
        source_start: First index of the dictionary span (inclusive).
        source_end: Last index of the dictionary span (inclusive).

    Returns:
        True if the lookahead bytes equal the dictionary bytes repeated
        to the lookahead length. Empty spans never match.

    Example:
        data = b"abcabcab", target = [3, 7] ("abcab"), source = [0, 2] ("abc")

        repeats, remainder = divmod(5, 3) = (1, 2)
        stretched = "abc" * 1 + "ab" = "abcab"
        Result: True
    """
    target_length = target_end - target_start + 1
    source_length = source_end - source_start + 1
    if target_length <= 0 or source_length <= 0:
        return False

    source = data[source_start : source_end + 1]

    # Shorter targets compare against a prefix of the source (repeats == 0).
    repeats, remainder = divmod(target_length, source_length)
    stretched = source * repeats + source[:remainder]

    return data[target_start : target_end + 1] == stretched


def longest_match(window: Window) -> Token:
    """Find the best token for the window's current cursor.

    Args:
        window: Scan state. Its lookahead must be non-empty.

    Returns:
        The longest match as a token, or a literal token carrying the first
        lookahead byte when nothing in the dictionary matches.

    The search is exhaustive:

        for each lookahead end i (ascending):
            for each dictionary start j (ascending):
                if [cursor+1, i] matches [j, cursor] tiled, and is longer:
                    remember (j, i)

    Offset is measured back from the dictionary end: cursor - j + 1.
    """
    data = window.data
    cursor = window.cursor

    best_length = 0
    best_start = -1
    best_end = -1

    # Each end is one byte further than the previous one, so a match found
    # for it is always strictly longer than the current best.
    for end in window.lookahead_indices():
        for start in window.dictionary_indices():
            if spans_equal(data, cursor + 1, end, start, cursor):
                best_length = end - cursor
                best_start = start
                best_end = end

                # Later starts give the same length and never replace this one.
                break

    if best_length == 0:
        next_index = cursor + 1
        return Token.literal(data[next_index] if next_index < len(data) else None)

    next_index = best_end + 1
    return Token(
        offset=cursor - best_start + 1,
        length=best_length,
        next_byte=data[next_index] if next_index < len(data) else None,
    )
