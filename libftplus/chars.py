"""Character classification and case conversion for ASCII code points."""

from __future__ import annotations

import operator

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of *c*, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code