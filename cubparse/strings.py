"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices into the text (or None when nothing is
found) instead of pointers, and functions that fill a caller's buffer
return the resulting text together with the length they report.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_size(n: int, name: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``; ``"\\0"`` finds the end of the text."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; ``"\\0"`` finds the end of the text."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _compare(a: str, b: str, limit: int | None) -> int:
    pairs = zip(a, b) if limit is None else zip(a[:limit], b[:limit])
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    if limit is not None:
        a, b = a[:limit], b[:limit]
    if len(a) == len(b):
        return 0
    # The shorter string ends with an implicit NUL.
    common = min(len(a), len(b))
    if len(a) > common:
        return ord(a[common])
    return -ord(b[common])


def strcmp(a: str | None, b: str | None) -> int:
    """Compare two strings; the difference of the first unequal characters, or 0.

    When either argument is None the result is 0.
    """
    if a is None or b is None:
        return 0
    return _compare(a, b, None)


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    n = _check_size(n, "n")
    return _compare(a, b, n)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    length = _check_size(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    start = _check_size(start, "start")
    length = _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for each character of a mutable sequence.

    A result other than None replaces that character in place.
    """
    for index, ch in enumerate(list(text)):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of ``src``, which exceeds the copied length when truncated.
    """
    size = _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had, counting ``dst`` as at most ``size`` characters long.
    """
    size = _check_size(size, "size")
    dest_length = len(dst)
    result = dst
    if size > 0 and dest_length < size - 1:
        result = dst + src[: size - 1 - dest_length]
    return result, min(dest_length, size) + len(src)