"""Byte-buffer operations on bytes-like objects."""

from __future__ import annotations

import operator

__all__ = ["calloc", "bzero", "memset", "memchr", "memcmp", "memcpy", "memmove"]

_SIZE_MAX = 2**64 - 1


def _view(buf) -> memoryview:
    view = memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _writable(buf) -> memoryview:
    view = _view(buf)
    if view.readonly:
        raise TypeError("buffer is read-only")
    return view


def _count(view: memoryview, n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(view):
        raise IndexError(f"{n} bytes requested but the buffer holds {len(view)}")
    return n


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes each.

    Raises MemoryError when the total size overflows the address range.
    """
    nmemb = operator.index(nmemb)
    size = operator.index(size)
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    total = nmemb * size
    if total > _SIZE_MAX:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(total)


def bzero(buf, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    view = _writable(buf)
    n = _count(view, n)
    view[:n] = bytes(n)


def memset(buf, c: int, n: int):
    """Fill the first *n* bytes of *buf* with the low byte of *c*; return *buf*."""
    view = _writable(buf)
    n = _count(view, n)
    view[:n] = bytes([operator.index(c) & 0xFF]) * n
    return buf


def memchr(buf, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to the low byte of *c*
    within the first *n* bytes of *buf*, or None."""
    view = _view(buf)
    n = _count(view, n)
    target = operator.index(c) & 0xFF
    return next((i for i, byte in enumerate(view[:n]) if byte == target), None)


def memcmp(s1, s2, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first unequal pair of bytes, or 0.
    """
    v1, v2 = _view(s1), _view(s2)
    n = _count(v1, n)
    _count(v2, n)
    return next((a - b for a, b in zip(v1[:n], v2[:n]) if a != b), 0)


def memcpy(dest, src, n: int):
    """Copy *n* bytes from *src* to the start of *dest*; return *dest*."""
    target = _writable(dest)
    source = _view(src)
    n = _count(target, n)
    _count(source, n)
    target[:n] = source[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy *n* bytes from *src* to *dest*, correct even when they overlap; return *dest*."""
    target = _writable(dest)
    source = _view(src)
    n = _count(target, n)
    _count(source, n)
    if n:
        target[:n] = bytes(source[:n])
    return dest