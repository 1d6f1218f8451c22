"""Typed, length-prefixed dump of a transfer result.

Output shapes::

    string(13) "Hello, world!"
    bool(false)
    NULL
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO


def render(value: Any) -> str:
    """Return the dump text for *value*, without a trailing newline."""
    if value is None:
        return "NULL"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return f"bool({'true' if value else 'false'})"
    if isinstance(value, int):
        return f"int({value})"
    if isinstance(value, float):
        return f"float({value!r})"
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="replace")
        return f'string({len(value)}) "{text}"'
    if isinstance(value, str):
        return f'string({len(value.encode("utf-8"))}) "{value}"'
    raise TypeError(f"Cannot dump value of type {type(value).__name__}")


def dump(value: Any, stream: Optional[TextIO] = None) -> None:
    """Write ``render(value)`` and a newline to *stream* (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render(value) + "\n")
    stream.flush()
