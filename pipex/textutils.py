"""String helpers: whitespace tests, splitting, trimming and bounded copies."""

from __future__ import annotations

from itertools import islice, zip_longest

_SPACE_CHARS = frozenset(" \t\n\v\f\r")


def is_space(char: str) -> bool:
    """Return True if ``char`` is a space, tab, newline, vertical tab, form feed or CR."""
    return char in _SPACE_CHARS if len(char) == 1 else False


def split_words(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def trim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int:
    """Return the index of ``needle`` lying wholly in the first ``limit`` characters.

    An empty needle is found at index 0. Returns -1 when there is no match.
    """
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    return haystack.find(needle, 0, limit)


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns zero when they match, otherwise the difference between the code
    points of the first differing characters (a missing character counts as 0).
    """
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, max(count, 0)):
        c1, c2 = ord(left), ord(right)
        if c1 == 0 or c1 != c2:
            return c1 - c2
    return 0


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have had.
    When ``size`` does not exceed the length of ``dest`` nothing is appended and
    the reported length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters) and ``len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)