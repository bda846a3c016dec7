"""Reading, changing and writing configuration documents.

Keys are addressed with dot notation (``section.key``); a part that meets
an array is read as a decimal index.
"""

from __future__ import annotations

import math
import re
import sys
from operator import itemgetter
from pathlib import Path
from typing import Any, Callable, Iterator, TextIO

from .parser import parse_json_file
from .values import JsonConfigError, JsonType, type_of

MAX_KEY_PARTS = 256

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_STRTOL_INDEX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_DECIMAL_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_NUMBER = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?")
_SPECIAL_NUMBER = re.compile(r"([+-]?)(?:(inf(?:inity)?)|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE)

_FILE_ESCAPES: dict[int, str] = {code: "\\u%04x" % code for code in range(32)}
_FILE_ESCAPES.update(
    {
        ord("\\"): "\\\\",
        ord('"'): '\\"',
        ord("\b"): "\\b",
        ord("\f"): "\\f",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)


def load_config(path: str | Path) -> Any:
    """Load a configuration document from ``path``."""
    return parse_json_file(path)


def _format_number(number: float) -> str:
    if isinstance(number, int) and _INT64_MIN <= number <= _INT64_MAX:
        return str(number)
    number = float(number)
    if math.isfinite(number) and number.is_integer() and _INT64_MIN <= number <= _INT64_MAX:
        return str(int(number))
    return "%g" % number


def _quote_escaped(text: str) -> str:
    return '"' + text.translate(_FILE_ESCAPES) + '"'


def _quote_raw(text: str) -> str:
    return f'"{text}"'


def _render(
    value: Any,
    indent: int,
    quote_key: Callable[[str], str],
    quote_string: Callable[[str], str],
) -> Iterator[str]:
    kind = type_of(value)
    if kind is JsonType.NULL:
        yield "null"
    elif kind is JsonType.BOOL:
        yield "true" if value else "false"
    elif kind is JsonType.NUMBER:
        yield _format_number(value)
    elif kind is JsonType.STRING:
        yield quote_string(value)
    elif kind is JsonType.OBJECT:
        if not value:
            yield "{}"
            return
        pad = "  " * (indent + 1)
        yield "{\n"
        for position, (key, child) in enumerate(sorted(value.items(), key=itemgetter(0))):
            if position:
                yield ",\n"
            yield f"{pad}{quote_key(key)}: "
            yield from _render(child, indent + 1, quote_key, quote_string)
        yield "\n" + "  " * indent + "}"
    else:
        if not value:
            yield "[]"
            return
        pad = "  " * (indent + 1)
        yield "[\n"
        for position, child in enumerate(value):
            if position:
                yield ",\n"
            yield pad
            yield from _render(child, indent + 1, quote_key, quote_string)
        yield "\n" + "  " * indent + "]"


def dump_config(value: Any) -> str:
    """Return the text that ``save_config`` writes for ``value``.

    Object keys are sorted, nesting is indented by two spaces and the text
    ends with a newline.
    """
    return "".join(_render(value, 0, _quote_raw, _quote_escaped)) + "\n"


def save_config(path: str | Path, value: Any) -> None:
    """Write ``value`` to ``path``; raises JsonConfigError if that fails."""
    text = dump_config(value)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise JsonConfigError(
            f"failed to open file '{path}' for writing: {exc.strerror or exc}"
        ) from exc


def _key_parts(key: str) -> list[str]:
    return [part for part in key.split(".") if part]


def _parse_index(token: str) -> int | None:
    match = _STRTOL_INDEX.fullmatch(token)
    return int(match.group(1)) if match else None


def get_nested_item(root: Any, key: str) -> Any:
    """Return the value at the dotted ``key``.

    Raises KeyError when the key is missing, an array index is invalid or
    the path runs into a scalar.
    """
    current = root
    for part in _key_parts(key):
        kind = type_of(current)
        if kind is JsonType.OBJECT:
            if part not in current:
                raise KeyError(key)
            current = current[part]
        elif kind is JsonType.ARRAY:
            index = _parse_index(part)
            if index is None or index < 0 or index >= len(current):
                raise KeyError(f"invalid array index '{part}' for key '{key}'")
            current = current[index]
        else:
            raise KeyError(key)
    return current


def _parse_float(text: str) -> float | None:
    body = text.lstrip(" \t\n\v\f\r")
    if _DECIMAL_NUMBER.fullmatch(body):
        return float(body)
    if _HEX_NUMBER.fullmatch(body):
        return float.fromhex(body)
    special = _SPECIAL_NUMBER.fullmatch(body)
    if special:
        sign = -1.0 if special.group(1) == "-" else 1.0
        return math.copysign(math.inf if special.group(2) else math.nan, sign)
    return None


def parse_scalar(value_str: str) -> Any:
    """Turn command-line text into a JSON scalar.

    ``true``, ``false`` and ``null`` become their literals, text that is
    wholly a number becomes a float and anything else stays a string.
    """
    if value_str == "true":
        return True
    if value_str == "false":
        return False
    if value_str == "null":
        return None
    if value_str:
        number = _parse_float(value_str)
        if number is not None:
            return number
    return value_str


def set_nested_item(root: Any, key: str, value_str: str) -> None:
    """Set the dotted ``key`` in ``root`` to the scalar read from ``value_str``.

    Missing objects along the way are created and arrays are extended as
    needed. Raises JsonConfigError when the key cannot be set.
    """
    parts = _key_parts(key)[:MAX_KEY_PARTS]
    if not parts:
        raise JsonConfigError("empty key")

    current = root
    for part in parts[:-1]:
        kind = type_of(current)
        if kind is JsonType.OBJECT:
            current = current.setdefault(part, {})
        elif kind is JsonType.ARRAY:
            index = _parse_index(part)
            if index is None or index < 0:
                raise JsonConfigError(f"invalid array index '{part}' for key '{key}'")
            while index >= len(current):
                current.append({})
            current = current[index]
        else:
            raise JsonConfigError(
                f"cannot set key part '{part}' on a non-object/non-array"
            )

    new_value = parse_scalar(value_str)
    last = parts[-1]
    kind = type_of(current)
    if kind is JsonType.OBJECT:
        current[last] = new_value
    elif kind is JsonType.ARRAY:
        index = _parse_index(last)
        if index is None or index < 0:
            raise JsonConfigError(f"invalid array index '{last}'")
        while index >= len(current):
            current.append(None)
        current[index] = new_value
    else:
        raise JsonConfigError(f"cannot set key '{last}' on a non-object/non-array")


def format_item(item: Any) -> str:
    """Return how ``item`` is shown to a user, without a trailing newline.

    Scalars are shown bare; containers are shown as indented JSON with
    sorted keys and strings left unescaped.
    """
    kind = type_of(item)
    if kind is JsonType.NUMBER:
        return _format_number(item)
    if kind is JsonType.STRING:
        return item
    if kind is JsonType.BOOL:
        return "true" if item else "false"
    return "".join(_render(item, 0, _quote_raw, _quote_raw))


def print_item(item: Any, file: TextIO | None = None) -> None:
    """Print ``item`` as ``format_item`` shows it, followed by a newline."""
    print(format_item(item), file=file if file is not None else sys.stdout)