"""A JSON value type with its own parser and serializer."""

from __future__ import annotations

import copy
import math
from enum import Enum
from typing import Any, Dict, List, Tuple

_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_WHITESPACE = " \t\n\r"
_INDENT = "    "

_SERIAL_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_PARSE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonValueType(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class JsonParseException(ValueError):
    """Raised for malformed JSON text and for access of the wrong kind."""


def _convert(value: Any) -> Tuple[JsonValueType, Any]:
    if isinstance(value, JsonValue):
        return value._type, copy.deepcopy(value._data)
    if value is None:
        return JsonValueType.NULL, None
    if isinstance(value, bool):
        return JsonValueType.BOOLEAN, value
    if isinstance(value, (int, float)):
        return JsonValueType.NUMBER, float(value)
    if isinstance(value, str):
        return JsonValueType.STRING, value
    if isinstance(value, (list, tuple)):
        return JsonValueType.ARRAY, [JsonValue(item) for item in value]
    if isinstance(value, dict):
        data: Dict[str, JsonValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {key!r}")
            data[key] = JsonValue(item)
        return JsonValueType.OBJECT, data
    raise TypeError(f"cannot store {type(value).__name__} in a JsonValue")


def _escape_string(text: str) -> str:
    out = ['"']
    for ch in text:
        escaped = _SERIAL_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif " " <= ch <= "~":
            out.append(ch)
        else:
            code = ord(ch)
            if code > 0xFFFF:
                code -= 0x10000
                out.append(f"\\u{0xD800 + (code >> 10):04x}")
                out.append(f"\\u{0xDC00 + (code & 0x3FF):04x}")
            else:
                out.append(f"\\u{code:04x}")
    out.append('"')
    return "".join(out)


def _format_number(value: float) -> str:
    if math.isinf(value) or math.isnan(value):
        return "null"
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


class JsonValue:
    """A JSON null, boolean, number, string, array or object.

    Indexing a null value turns it into an array or object; indexing an
    array past its end grows it with nulls; indexing an object with a
    missing key adds that key with a null value.
    """

    __slots__ = ("_type", "_data")

    def __init__(self, value: Any = None) -> None:
        self._type, self._data = _convert(value)

    @classmethod
    def _from_parts(cls, kind: JsonValueType, data: Any) -> "JsonValue":
        result = cls.__new__(cls)
        result._type = kind
        result._data = data
        return result

    @property
    def type(self) -> JsonValueType:
        return self._type

    def is_null(self) -> bool:
        return self._type is JsonValueType.NULL

    def is_bool(self) -> bool:
        return self._type is JsonValueType.BOOLEAN

    def is_number(self) -> bool:
        return self._type is JsonValueType.NUMBER

    def is_string(self) -> bool:
        return self._type is JsonValueType.STRING

    def is_array(self) -> bool:
        return self._type is JsonValueType.ARRAY

    def is_object(self) -> bool:
        return self._type is JsonValueType.OBJECT

    def as_bool(self) -> bool:
        if not self.is_bool():
            raise JsonParseException("Value is not a boolean.")
        return self._data

    def as_number(self) -> float:
        if not self.is_number():
            raise JsonParseException("Value is not a number.")
        return self._data

    def as_string(self) -> str:
        if not self.is_string():
            raise JsonParseException("Value is not a string.")
        return self._data

    def as_array(self) -> List["JsonValue"]:
        """Return the underlying list of elements (mutable)."""
        if not self.is_array():
            raise JsonParseException("Value is not an array.")
        return self._data

    def as_object(self) -> Dict[str, "JsonValue"]:
        """Return the underlying mapping of members (mutable)."""
        if not self.is_object():
            raise JsonParseException("Value is not an object.")
        return self._data

    def _array_with(self, index: int) -> List["JsonValue"]:
        if not self.is_array():
            if not self.is_null():
                raise JsonParseException(
                    "Value is not an array, cannot access by index."
                )
            self._type, self._data = JsonValueType.ARRAY, []
        if index < 0:
            raise IndexError("Array index must not be negative.")
        items: List[JsonValue] = self._data
        items.extend(JsonValue() for _ in range(index + 1 - len(items)))
        return items

    def _object(self) -> Dict[str, "JsonValue"]:
        if not self.is_object():
            if not self.is_null():
                raise JsonParseException(
                    "Value is not an object, cannot access by key."
                )
            self._type, self._data = JsonValueType.OBJECT, {}
        return self._data

    @staticmethod
    def _is_index(key: Any) -> bool:
        return isinstance(key, int) and not isinstance(key, bool)

    def __getitem__(self, key: Any) -> "JsonValue":
        if self._is_index(key):
            return self._array_with(key)[key]
        if isinstance(key, str):
            return self._object().setdefault(key, JsonValue())
        raise TypeError(f"JSON values are indexed by int or str, not {key!r}")

    def __setitem__(self, key: Any, value: Any) -> None:
        new_value = JsonValue(value)
        if self._is_index(key):
            self._array_with(key)[key] = new_value
        elif isinstance(key, str):
            self._object()[key] = new_value
        else:
            raise TypeError(f"JSON values are indexed by int or str, not {key!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            try:
                other = JsonValue(other)
            except TypeError:
                return NotImplemented
        return self._type is other._type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonValue({self.serialize()})"

    def __str__(self) -> str:
        return self.serialize()

    def serialize(self, pretty: bool = False, indent_level: int = 0) -> str:
        """Render as JSON text; ``pretty`` indents by four spaces per level."""
        parts: List[str] = []
        self._write(parts, pretty, indent_level)
        return "".join(parts)

    def _write(self, out: List[str], pretty: bool, level: int) -> None:
        newline = "\n" if pretty else ""

        def indent(depth: int) -> str:
            return _INDENT * depth if pretty else ""

        kind = self._type
        if kind is JsonValueType.NULL:
            out.append("null")
        elif kind is JsonValueType.BOOLEAN:
            out.append("true" if self._data else "false")
        elif kind is JsonValueType.NUMBER:
            out.append(_format_number(self._data))
        elif kind is JsonValueType.STRING:
            out.append(_escape_string(self._data))
        elif kind is JsonValueType.ARRAY:
            items: List[JsonValue] = self._data
            out.append("[")
            if items:
                out.append(newline)
            for position, item in enumerate(items):
                out.append(indent(level + 1))
                item._write(out, pretty, level + 1)
                if position < len(items) - 1:
                    out.append(",")
                out.append(newline)
            if items:
                out.append(indent(level))
            out.append("]")
        else:
            members: Dict[str, JsonValue] = self._data
            out.append("{")
            if members:
                out.append(newline)
            for position, (key, item) in enumerate(members.items()):
                out.append(indent(level + 1))
                out.append(_escape_string(key))
                out.append(": " if pretty else ":")
                item._write(out, pretty, level + 1)
                if position < len(members) - 1:
                    out.append(",")
                out.append(newline)
            if members:
                out.append(indent(level))
            out.append("}")


class JsonParser:
    """A strict recursive-descent JSON parser.

    Unicode escapes are accepted only for ASCII code points.
    """

    def __init__(self) -> None:
        self._text = ""
        self._pos = 0

    def parse(self, text: str) -> JsonValue:
        """Parse ``text`` as a single JSON document."""
        self._text = text
        self._pos = 0
        self._skip_whitespace()
        if self._pos >= len(self._text):
            raise JsonParseException("Empty JSON string.")
        result = self._parse_value()
        self._skip_whitespace()
        if self._pos < len(self._text):
            raise JsonParseException("Unexpected characters after JSON root element.")
        return result

    def _skip_whitespace(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else "\0"

    def _next(self) -> str:
        if self._pos >= len(self._text):
            raise JsonParseException("Unexpected end of input.")
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _match(self, ch: str) -> bool:
        if self._peek() == ch:
            self._pos += 1
            return True
        return False

    def _peek_digit(self) -> bool:
        return self._peek() in _DIGITS

    def _parse_value(self) -> JsonValue:
        self._skip_whitespace()
        ch = self._peek()
        if ch == "n":
            return self._parse_literal("null", None, "Expected 'null'.")
        if ch in "tf":
            return self._parse_bool()
        if ch == "-" or ch in _DIGITS:
            return self._parse_number()
        if ch == '"':
            return self._parse_string()
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_object()
        raise JsonParseException(f"Unexpected character '{ch}' at position {self._pos}")

    def _parse_literal(self, word: str, value: Any, error: str) -> JsonValue:
        if not self._text.startswith(word, self._pos):
            raise JsonParseException(error)
        self._pos += len(word)
        return JsonValue(value)

    def _parse_bool(self) -> JsonValue:
        for word, value in (("true", True), ("false", False)):
            if self._text.startswith(word, self._pos):
                self._pos += len(word)
                return JsonValue(value)
        raise JsonParseException("Expected 'true' or 'false'.")

    def _parse_number(self) -> JsonValue:
        start = self._pos
        self._match("-")
        if not self._peek_digit():
            raise JsonParseException(
                f"Invalid number format: expected digit at position {self._pos}"
            )
        if self._match("0"):
            if self._peek_digit():
                raise JsonParseException(
                    "Invalid number: leading zero not allowed for non-zero numbers."
                )
        else:
            while self._peek_digit():
                self._pos += 1

        if self._match("."):
            if not self._peek_digit():
                raise JsonParseException(
                    "Invalid number: expected digit after decimal point at position "
                    f"{self._pos}"
                )
            while self._peek_digit():
                self._pos += 1

        if self._peek() in "eE" and self._peek() != "\0":
            self._pos += 1
            if self._peek() in "+-" and self._peek() != "\0":
                self._pos += 1
            if not self._peek_digit():
                raise JsonParseException(
                    "Invalid number: expected digit after exponent sign at position "
                    f"{self._pos}"
                )
            while self._peek_digit():
                self._pos += 1

        literal = self._text[start:self._pos]
        try:
            value = float(literal)
        except ValueError:
            raise JsonParseException(f"Invalid number format: {literal}") from None
        if math.isinf(value):
            raise JsonParseException(f"Number out of range: {literal}")
        return JsonValue._from_parts(JsonValueType.NUMBER, value)

    def _parse_string_content(self) -> str:
        pieces: List[str] = []
        segment_start = self._pos
        text = self._text
        while self._peek() != '"':
            if self._pos >= len(text):
                raise JsonParseException("Unterminated string.")
            ch = text[self._pos]
            if ch == "\\":
                pieces.append(text[segment_start:self._pos])
                self._pos += 1
                pieces.append(self._parse_escape())
                segment_start = self._pos
            elif ord(ch) < 0x20:
                raise JsonParseException(
                    f"Unescaped control character in string at position {self._pos}"
                )
            else:
                self._pos += 1
        pieces.append(text[segment_start:self._pos])
        return "".join(pieces)

    def _parse_escape(self) -> str:
        if self._pos >= len(self._text):
            raise JsonParseException("Incomplete escape sequence.")
        escape = self._next()
        if escape in _PARSE_ESCAPES:
            return _PARSE_ESCAPES[escape]
        if escape == "u":
            hex_digits = []
            for _ in range(4):
                if self._pos >= len(self._text):
                    raise JsonParseException("Incomplete unicode escape sequence.")
                digit = self._next()
                if digit not in _HEX_DIGITS:
                    raise JsonParseException(
                        "Invalid hex digit in unicode escape sequence at position "
                        f"{self._pos - 1}"
                    )
                hex_digits.append(digit)
            hex_text = "".join(hex_digits)
            code = int(hex_text, 16)
            if code <= 0x7F:
                return chr(code)
            raise JsonParseException(
                f"Unsupported non-ASCII unicode escape sequence \\u{hex_text}. "
                "Full UTF-8 not implemented for parsing."
            )
        raise JsonParseException(
            f"Invalid escape sequence '\\{escape}' at position {self._pos - 1}"
        )

    def _parse_string(self) -> JsonValue:
        if not self._match('"'):
            raise JsonParseException(
                f"Expected '\"' to start string at position {self._pos}"
            )
        content = self._parse_string_content()
        if not self._match('"'):
            raise JsonParseException(
                f"Expected '\"' to end string at position {self._pos}"
            )
        return JsonValue._from_parts(JsonValueType.STRING, content)

    def _parse_array(self) -> JsonValue:
        if not self._match("["):
            raise JsonParseException(
                f"Expected '[' to start array at position {self._pos}"
            )
        items: List[JsonValue] = []
        self._skip_whitespace()
        if self._match("]"):
            return JsonValue._from_parts(JsonValueType.ARRAY, items)

        while True:
            items.append(self._parse_value())
            self._skip_whitespace()
            if self._match(","):
                self._skip_whitespace()
            elif self._match("]"):
                break
            else:
                raise JsonParseException(
                    f"Expected ',' or ']' after array element at position {self._pos}"
                )
        return JsonValue._from_parts(JsonValueType.ARRAY, items)

    def _parse_object(self) -> JsonValue:
        if not self._match("{"):
            raise JsonParseException(
                f"Expected '{{' to start object at position {self._pos}"
            )
        members: Dict[str, JsonValue] = {}
        self._skip_whitespace()
        if self._match("}"):
            return JsonValue._from_parts(JsonValueType.OBJECT, members)

        while True:
            self._skip_whitespace()
            if not self._match('"'):
                raise JsonParseException(
                    f"Expected '\"' for object key at position {self._pos}"
                )
            key = self._parse_string_content()
            if not self._match('"'):
                raise JsonParseException(
                    f"Expected '\"' to end object key at position {self._pos}"
                )
            self._skip_whitespace()
            if not self._match(":"):
                raise JsonParseException(
                    f"Expected ':' after object key at position {self._pos}"
                )
            self._skip_whitespace()
            members[key] = self._parse_value()
            self._skip_whitespace()
            if self._match(","):
                self._skip_whitespace()
            elif self._match("}"):
                break
            else:
                raise JsonParseException(
                    f"Expected ',' or '}}' after object value at position {self._pos}"
                )
        return JsonValue._from_parts(JsonValueType.OBJECT, members)


def parse_json(text: str) -> JsonValue:
    """Parse ``text`` with a fresh :class:`JsonParser`."""
    return JsonParser().parse(text)