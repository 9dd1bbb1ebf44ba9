"""Formatted output supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Callable
from typing import Any, TextIO

__all__ = ["sprintf", "printf"]

_CONVERSION = re.compile(r"%([cspdiuxX%])")

_UINT_MASK = 2**32 - 1
_PTR_MASK = 2**64 - 1


def _as_int32(value: Any) -> int:
    value = operator.index(value) & _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _as_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_ptr(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _PTR_MASK
    if not address:
        return "(nil)"
    return "0x" + format(address, "x")


def _format_int(value: Any) -> str:
    return str(_as_int32(value))


def _format_uint(value: Any) -> str:
    return str(_as_uint32(value))


def _format_hex_lower(value: Any) -> str:
    return format(_as_uint32(value), "x")


def _format_hex_upper(value: Any) -> str:
    return format(_as_uint32(value), "X")


_FORMATTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_ptr,
    "d": _format_int,
    "i": _format_int,
    "u": _format_uint,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*.

    A ``%`` not followed by a supported conversion is kept as written.
    Integers are taken as 32-bit values and pointers as 64-bit addresses.
    Raises TypeError when *fmt* is None or an argument is missing.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining = iter(args)

    def substitute(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        return _FORMATTERS[spec](value)

    return _CONVERSION.sub(substitute, fmt)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)