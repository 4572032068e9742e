"""Small text scanning helpers used when reading XPM data."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Text up to its first NUL character, if any."""
    return text.split("\0", 1)[0]


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs only; other whitespace stays in words."""
    return [word for word in _BLANKS.split(_terminated(text)) if word]


def find(text: str, needle: str, limit: int) -> int:
    """Position of the first occurrence of needle, or -1.

    Returns -1 at once when needle is longer than limit.
    """
    if len(needle) > limit:
        return -1
    return _terminated(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like find, but skips occurrences inside double-quoted stretches."""
    if len(needle) > limit:
        return -1
    text = _terminated(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if pos < len(text) and text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1