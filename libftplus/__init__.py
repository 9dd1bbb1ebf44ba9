"""Utility routines: character tests, conversions, byte buffers, strings, a linked list, descriptor output, line reading and printf."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "conversions",
    "memory",
    "strings",
    "linked_list",
    "output",
    "printf",
    "line_reader",
]