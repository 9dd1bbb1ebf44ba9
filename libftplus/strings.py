"""String searching, comparison and construction helpers."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]


def _char(c: int | str) -> str:
    """Return *c*, an int code or a one-character string, as a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _c_bytes(data) -> bytes:
    """Return the bytes of *data* up to, not including, its first NUL."""
    raw = memoryview(data).tobytes()
    return raw.partition(b"\0")[0]


def _byte_buffer(buf) -> memoryview:
    view = memoryview(buf)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def strlen(s: str) -> int:
    """Return the number of characters in *s*."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*, or None.

    Searching for the NUL character gives the length of *s*.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*, or None.

    Searching for the NUL character gives the length of *s*.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first unequal pair of character codes, the
    end of a string counting as code 0, or 0 when they match.
    """
    n = _non_negative(n, "n")
    pairs = zip_longest(map(ord, s1), map(ord, s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of *little* within the first *length* characters of *big*.

    An empty *little* is found at index 0. Returns None when there is no match
    lying wholly inside that prefix.
    """
    length = _non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start at or past the end gives the empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty words."""
    ch = _char(sep)
    if ch == "\0":
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string built from ``f(index, char)`` for each character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` for each item of the mutable sequence *s*.

    A result other than None replaces the item in place.
    """
    if not isinstance(s, MutableSequence):
        raise TypeError(f"expected a mutable sequence, got {type(s).__name__}")
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(dst, src, size: int) -> int:
    """Copy the NUL-terminated *src* into the byte buffer *dst* of *size* bytes.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated.
    Returns the length of *src*.
    """
    source = _c_bytes(src)
    size = _non_negative(size, "size")
    if size == 0:
        return len(source)
    view = _byte_buffer(dst)
    if size > len(view):
        raise IndexError(f"size {size} exceeds the buffer of {len(view)} bytes")
    copied = source[: size - 1]
    view[: len(copied)] = copied
    view[len(copied)] = 0
    return len(source)


def strlcat(dst, src, size: int) -> int:
    """Append the NUL-terminated *src* to the NUL-terminated string in *dst*.

    The combined string is kept within *size* bytes including its terminator.
    Returns the length the string would have had without truncation; when
    *size* does not exceed the current length of *dst*, returns
    ``len(src) + size`` and leaves *dst* untouched.
    """
    source = _c_bytes(src)
    size = _non_negative(size, "size")
    if size == 0:
        return len(source)
    view = _byte_buffer(dst)
    if size > len(view):
        raise IndexError(f"size {size} exceeds the buffer of {len(view)} bytes")
    dst_len = len(_c_bytes(view))
    if size <= dst_len:
        return len(source) + size
    copied = source[: size - 1 - dst_len]
    end = dst_len + len(copied)
    view[dst_len:end] = copied
    view[end] = 0
    return len(source) + dst_len