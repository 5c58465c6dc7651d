"""A small JSON reader and pretty printer working on plain Python values.

Values are ``None``, ``bool``, ``int``, ``float``, ``str``, ``list`` and
``dict``.  Integers that do not fit in 32 bits are read as floats.
"""

from __future__ import annotations

import io
import math
from dataclasses import dataclass
from typing import Any, List, TextIO

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INDENT_STEP = 4


class ParsingError(ValueError):
    """Raised when JSON input is malformed."""


@dataclass(eq=False)
class Document:
    """A JSON document holding a single root value."""

    root: Any = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return _same(self.root, other.root)


def _same(left: Any, right: Any) -> bool:
    if type(left) is not type(right):
        return False
    if isinstance(left, list):
        return len(left) == len(right) and all(map(_same, left, right))
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(_same(v, right[k]) for k, v in left.items())
    return left == right


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _next_significant(self) -> str | None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            return None
        char = text[self._pos]
        self._pos += 1
        return char

    def parse_node(self) -> Any:
        char = self._next_significant()
        if char is None:
            raise ParsingError("Unexpected EOF")
        if char == "[":
            return self._array()
        if char == "{":
            return self._dict()
        if char == '"':
            return self._string()
        self._pos -= 1
        if char in ("t", "f"):
            return self._bool()
        if char == "n":
            return self._null()
        return self._number()

    def _array(self) -> list:
        result: list = []
        while True:
            char = self._next_significant()
            if char is None:
                raise ParsingError("Array parsing error")
            if char == "]":
                return result
            if char != ",":
                self._pos -= 1
            result.append(self.parse_node())

    def _dict(self) -> dict:
        result: dict = {}
        while True:
            char = self._next_significant()
            if char is None:
                raise ParsingError("Dictionary parsing error")
            if char == "}":
                return result
            if char == '"':
                key = self._string()
                separator = self._next_significant()
                if separator != ":":
                    raise ParsingError(f": is expected but '{separator or ''}' has been found")
                if key in result:
                    raise ParsingError(f"Duplicate key '{key}' have been found")
                result[key] = self.parse_node()
            elif char != ",":
                raise ParsingError(f"',' is expected but '{char}' has been found")

    _ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}

    def _string(self) -> str:
        parts: List[str] = []
        text = self._text
        while True:
            if self._pos >= len(text):
                raise ParsingError("String parsing error")
            char = text[self._pos]
            self._pos += 1
            if char == '"':
                return "".join(parts)
            if char == "\\":
                if self._pos >= len(text):
                    raise ParsingError("String parsing error")
                escaped = text[self._pos]
                self._pos += 1
                try:
                    parts.append(self._ESCAPES[escaped])
                except KeyError:
                    raise ParsingError(f"Unrecognized escape sequence \\{escaped}") from None
            elif char in ("\n", "\r"):
                raise ParsingError("Unexpected end of line")
            else:
                parts.append(char)

    def _literal(self) -> str:
        start = self._pos
        while True:
            char = self._peek()
            if not (char and char.isascii() and char.isalpha()):
                break
            self._pos += 1
        return self._text[start:self._pos]

    def _bool(self) -> bool:
        literal = self._literal()
        if literal == "true":
            return True
        if literal == "false":
            return False
        raise ParsingError(f"Failed to parse '{literal}' as bool")

    def _null(self) -> None:
        literal = self._literal()
        if literal != "null":
            raise ParsingError(f"Failed to parse '{literal}' as null")
        return None

    def _digits(self) -> None:
        if self._peek() not in _DIGITS:
            raise ParsingError("A digit is expected")
        while self._peek() in _DIGITS:
            self._pos += 1

    def _number(self) -> int | float:
        start = self._pos
        if self._peek() == "-":
            self._pos += 1
        if self._peek() == "0":
            self._pos += 1
        else:
            self._digits()

        is_int = True
        if self._peek() == ".":
            self._pos += 1
            self._digits()
            is_int = False
        if self._peek() in ("e", "E"):
            self._pos += 1
            if self._peek() in ("+", "-"):
                self._pos += 1
            self._digits()
            is_int = False

        literal = self._text[start:self._pos]
        if is_int:
            value = int(literal)
            if _INT_MIN <= value <= _INT_MAX:
                return value
        number = float(literal)
        if math.isinf(number):
            raise ParsingError(f"Failed to convert {literal} to number")
        return number


def loads(text: str) -> Document:
    """Parse the first JSON value in ``text``; anything after it is ignored."""
    return Document(_Parser(text).parse_node())


def load(stream: TextIO) -> Document:
    """Parse a JSON document from a text stream."""
    return loads(stream.read())


def _quote(value: str) -> str:
    out = ['"']
    for char in value:
        if char == "\t":
            out.append("\\t")
        elif char == "\n":
            out.append("\\n")
        elif char == "\r":
            out.append("\\r")
        elif char in ('"', "\\"):
            out.append("\\" + char)
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def _indent(width: int) -> str:
    # The closing bracket of a top-level container gets a single space.
    return " " * max(width, 1)


def _write(value: Any, out: TextIO, indent: int) -> None:
    if value is None:
        out.write("null")
    elif isinstance(value, bool):
        out.write("true" if value else "false")
    elif isinstance(value, int):
        out.write(str(value))
    elif isinstance(value, float):
        out.write(format(value, "g"))
    elif isinstance(value, str):
        out.write(_quote(value))
    elif isinstance(value, list):
        nested = indent + _INDENT_STEP
        out.write("[\n")
        for position, item in enumerate(value):
            if position:
                out.write(",\n")
            out.write(_indent(nested))
            _write(item, out, nested)
        out.write("\n")
        out.write(_indent(indent))
        out.write("]")
    elif isinstance(value, dict):
        nested = indent + _INDENT_STEP
        out.write("{\n")
        for position, key in enumerate(sorted(value)):
            if position:
                out.write(",\n")
            out.write(_indent(nested))
            out.write(_quote(key))
            out.write(": ")
            _write(value[key], out, nested)
        out.write("\n")
        out.write(_indent(indent))
        out.write("}")
    else:
        raise TypeError(f"cannot write {type(value).__name__} as JSON")


def dump(document: Document, stream: TextIO) -> None:
    """Write ``document`` to ``stream`` as indented JSON."""
    _write(document.root, stream, 0)


def dumps(document: Document) -> str:
    """Return ``document`` as indented JSON text."""
    buffer = io.StringIO()
    dump(document, buffer)
    return buffer.getvalue()