"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

import operator

__all__ = ["atoi", "atoi_longlong", "itoa"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a two's-complement signed integer of *bits* width."""
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str, bits: int) -> int:
    """Parse leading decimal text with *bits*-wide wrapping accumulation.

    Leading whitespace and one optional sign are skipped, and digits are read
    until the first non-digit. When the accumulator is seen to wrap, a positive
    number yields -1 and a negative one yields 0.
    """
    length = len(text)
    i = 0
    while i < length and text[i] in _WHITESPACE:
        i += 1
    negative = False
    if i < length and text[i] in "+-":
        negative = text[i] == "-"
        i += 1

    result = 0
    for ch in text[i:]:
        if ch not in _DIGITS:
            break
        previous = result
        result = _wrap(result * 10 + int(ch), bits)
        if not negative and previous > result:
            return -1
        if negative and previous > _wrap(result + 1, bits):
            return 0
    return _wrap(-result if negative else result, bits)


def atoi(text: str) -> int:
    """Convert the leading decimal number in *text* to a 32-bit signed integer.

    Digits are accumulated in 64 bits and the result is then truncated to 32
    bits. Text without a number gives 0.
    """
    return _wrap(_parse(text, 64), 32)


def atoi_longlong(text: str) -> int:
    """Convert the leading decimal number in *text* to a 64-bit signed integer."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)