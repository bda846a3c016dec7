"""Turn Python JSON values back into JSON text.

Numbers are written with ``%g`` formatting. Object members are written with
the most recently added member first. Nesting deeper than ``MAX_DEPTH``
levels is written as ``null``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from .values import JsonType, type_of

logger = logging.getLogger(__name__)

MAX_DEPTH = 1000
MAX_SIZE = 100 * 1024 * 1024
MAX_INDENT = 100

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_ESCAPE_TABLE = str.maketrans(_ESCAPES)
_DONE = object()


def format_number(number: float) -> str:
    """Format a number the way ``%g`` does."""
    return "%g" % number


def escape_string(text: str) -> str:
    """Escape quotes, backslashes and the common control characters."""
    return text.translate(_ESCAPE_TABLE)


@dataclass
class _Frame:
    items: Iterator[Any]
    level: int
    closer: str
    is_object: bool
    nonempty: bool
    first: bool = True


def _indent(level_width: int) -> str:
    return "\n" + " " * min(level_width, MAX_INDENT)


def json_to_string(value: Any, pretty: bool = False) -> str:
    """Serialize ``value`` to JSON text, optionally indented.

    Returns ``"null"`` when the result would exceed the size limit.
    Raises TypeError for values with no JSON counterpart.
    """
    parts: list[str] = []
    stack: list[_Frame] = []

    def open_value(item: Any, level: int) -> None:
        if level > MAX_DEPTH:
            logger.error("JSON nesting too deep")
            parts.append("null")
            return
        kind = type_of(item)
        if kind is JsonType.NULL:
            parts.append("null")
        elif kind is JsonType.BOOL:
            parts.append("true" if item else "false")
        elif kind is JsonType.NUMBER:
            parts.append(format_number(item))
        elif kind is JsonType.STRING:
            parts.append(f'"{escape_string(item)}"')
        elif kind is JsonType.ARRAY:
            parts.append("[")
            stack.append(_Frame(iter(item), level, "]", False, bool(item)))
        else:
            parts.append("{")
            members = iter(reversed(list(item.items())))
            stack.append(_Frame(members, level, "}", True, bool(item)))

    open_value(value, 0)
    separator = ", " if pretty else ","
    colon = ": " if pretty else ":"

    while stack:
        frame = stack[-1]
        child = next(frame.items, _DONE)
        if child is _DONE:
            stack.pop()
            if pretty and frame.nonempty:
                parts.append(_indent(frame.level * 2))
            parts.append(frame.closer)
            continue
        if not frame.first:
            parts.append(separator)
        frame.first = False
        if pretty:
            parts.append(_indent((frame.level + 1) * 2))
        if frame.is_object:
            key, child = child
            parts.append(f'"{escape_string(key)}"{colon}')
        open_value(child, frame.level + 1)

    result = "".join(parts)
    if len(result) > MAX_SIZE:
        logger.error("JSON string too large (over 100MB)")
        return "null"
    return result