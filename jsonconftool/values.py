"""JSON value kinds and the exception shared by the package.

JSON values are held as plain Python objects: ``None``, ``bool``, ``float``
(or ``int``), ``str``, ``list`` and ``dict``.
"""

from __future__ import annotations

import enum
from typing import Any


class JsonConfigError(Exception):
    """Raised when a configuration cannot be read, changed or written."""


class JsonType(enum.Enum):
    """The kinds of value a JSON document can hold."""

    NULL = 0
    BOOL = 1
    NUMBER = 2
    STRING = 3
    ARRAY = 4
    OBJECT = 5


def type_of(value: Any) -> JsonType:
    """Return the JSON kind of a Python value.

    Raises TypeError for values that have no JSON counterpart.
    """
    if value is None:
        return JsonType.NULL
    # bool is a subclass of int, so it has to be checked first.
    if isinstance(value, bool):
        return JsonType.BOOL
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, list):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"unsupported JSON value type: {type(value).__name__}")