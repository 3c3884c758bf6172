"""String helpers: lenient integer parsing, splitting, trimming and searching."""

from __future__ import annotations

import sys
from itertools import zip_longest
from typing import TextIO

from philo.config import parse_int


def atoi(text: str) -> int:
    """Read a leading integer: skip blanks, take one sign, then digits.

    Trailing text is ignored and text without digits reads as 0. The value
    wraps around like a 32-bit signed integer.
    """
    return parse_int(text)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"itoa needs an integer, not {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("sep must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying entirely within the first ``length`` characters.

    Returns the index where it starts, or None when it is not found. An
    empty needle is always found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match, otherwise the difference between the code
    points of the first pair of characters that differ; a string that ends
    early compares as if followed by a zero character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def put_number(n: int, file: TextIO | None = None) -> None:
    """Write the decimal representation of ``n`` to ``file`` (stdout by default)."""
    (file if file is not None else sys.stdout).write(itoa(n))