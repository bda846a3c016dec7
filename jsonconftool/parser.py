"""A small, lenient JSON reader.

String contents are kept exactly as written between the quotes: escape
sequences are not decoded. Numbers are read as floats, taking the longest
numeric prefix of the scanned token.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from .values import JsonConfigError

logger = logging.getLogger(__name__)

MAX_SIZE = 100 * 1024 * 1024

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class JsonParseError(JsonConfigError):
    """Raised when text cannot be read as JSON."""


def _leading_number(token: str) -> float:
    """Value of the longest numeric prefix of ``token``, or 0.0 if none."""
    match = _NUMBER_PREFIX.match(token)
    return float(match.group()) if match else 0.0


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.at_end else self.text[self.pos]

    def skip_whitespace(self) -> None:
        while not self.at_end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def fail(self, message: str) -> JsonParseError:
        return JsonParseError(f"{message} at offset {self.pos}")

    def parse_string(self) -> str:
        if self.peek() != '"':
            raise self.fail("expected string")
        self.pos += 1
        start = self.pos
        escaped = False
        while not self.at_end:
            char = self.text[self.pos]
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                break
            self.pos += 1
        if self.at_end:
            raise self.fail("unterminated string")
        end = self.pos
        self.pos += 1
        return self.text[start:end]

    def parse_array(self) -> list[Any]:
        self.pos += 1
        self.skip_whitespace()
        items: list[Any] = []
        if self.peek() == "]":
            self.pos += 1
            return items
        while not self.at_end:
            self.skip_whitespace()
            items.append(self.parse_value())
            self.skip_whitespace()
            char = self.peek()
            if char == "]":
                self.pos += 1
                return items
            if char != ",":
                raise self.fail("expected ',' or ']'")
            self.pos += 1
        raise self.fail("unterminated array")

    def parse_object(self) -> dict[str, Any]:
        self.pos += 1
        self.skip_whitespace()
        members: dict[str, Any] = {}
        if self.peek() == "}":
            self.pos += 1
            return members
        while not self.at_end:
            self.skip_whitespace()
            key = self.parse_string()
            self.skip_whitespace()
            if self.peek() != ":":
                raise self.fail("expected ':'")
            self.pos += 1
            self.skip_whitespace()
            members[key] = self.parse_value()
            self.skip_whitespace()
            char = self.peek()
            if char == "}":
                self.pos += 1
                return members
            if char != ",":
                raise self.fail("expected ',' or '}'")
            self.pos += 1
        raise self.fail("unterminated object")

    def parse_number(self) -> float:
        char = self.peek()
        if not char or (char not in _DIGITS and char not in "-+."):
            raise self.fail("unexpected character")
        start = self.pos
        has_decimal = has_exponent = False
        while not self.at_end:
            char = self.text[self.pos]
            if char == ".":
                if has_decimal:
                    break
                has_decimal = True
            elif char in "eE":
                if has_exponent:
                    break
                has_exponent = True
            elif char not in _DIGITS and char not in "-+":
                break
            self.pos += 1
        return _leading_number(self.text[start:self.pos])

    def parse_literal(self, word: str, value: Any) -> Any:
        if not self.text.startswith(word, self.pos):
            raise self.fail("invalid literal")
        self.pos += len(word)
        return value

    def parse_value(self) -> Any:
        if self.at_end:
            raise self.fail("unexpected end of input")
        self.skip_whitespace()
        char = self.peek()
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        if char == '"':
            return self.parse_string()
        if char == "t":
            return self.parse_literal("true", True)
        if char == "f":
            return self.parse_literal("false", False)
        if char == "n":
            return self.parse_literal("null", None)
        return self.parse_number()


def parse_json_string(text: str) -> Any:
    """Parse JSON text into Python values.

    Text after the first complete value is ignored with a warning.
    Raises JsonParseError when the text is empty, too large or malformed.
    """
    text = text.split("\0", 1)[0]
    if not text:
        raise JsonParseError("empty JSON string provided")
    if len(text) > MAX_SIZE:
        raise JsonParseError("JSON string too large (over 100MB)")
    parser = _Parser(text)
    try:
        result = parser.parse_value()
    except RecursionError:
        raise JsonParseError("JSON nesting too deep") from None
    parser.skip_whitespace()
    if not parser.at_end:
        logger.warning("extra characters found after JSON data")
    return result


def parse_json_file(path: str | Path) -> Any:
    """Read and parse a JSON file.

    An empty file or one that does not parse yields an empty object.
    Raises JsonConfigError when the file cannot be read or is too large.
    """
    path = Path(path)
    try:
        with path.open("rb") as handle:
            size = handle.seek(0, 2)
            if size == 0:
                logger.error("file '%s' is empty", path)
                return {}
            if size > MAX_SIZE:
                raise JsonConfigError(f"file '{path}' is too large (over 100MB)")
            handle.seek(0)
            data = handle.read()
    except OSError as exc:
        raise JsonConfigError(f"failed to open file '{path}': {exc.strerror or exc}") from exc
    if not data:
        raise JsonConfigError(f"failed to read from file '{path}'")
    try:
        return parse_json_string(data.decode("utf-8", errors="replace"))
    except JsonParseError as exc:
        logger.error("failed to parse JSON in '%s': %s", path, exc)
        return {}