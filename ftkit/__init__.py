"""Helpers for characters, byte buffers, strings, linked lists and line reading."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "transform",
    "output",
    "search",
    "linked_list",
    "line_reader",
]