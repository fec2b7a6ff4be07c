"""Byte-buffer operations on bytes-like objects.

Sizes that reach past the end of a buffer raise ``ValueError`` rather than
touching memory that is not there.
"""

from __future__ import annotations

import operator

_INT_MAX = 2**31 - 1


def _check_size(n: int, *buffers) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"size {n} exceeds buffer length {len(buf)}")
    return n


def memset(buf, value: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    n = _check_size(n, buf)
    buf[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would exceed the largest C int.
    """
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > _INT_MAX // size:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def memchr(buf, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within the first ``n``, or None."""
    n = _check_size(n, buf)
    target = operator.index(value) & 0xFF
    index = bytes(buf[:n]).find(target)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    n = _check_size(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    n = _check_size(n, dest, src)
    if dest is src:
        return dest
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dest``; overlapping views are handled."""
    n = _check_size(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest