"""Literal input values, variables, arguments and directives."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from gqlcore.errors import Location

__all__ = [
    "TokenKind",
    "Ident",
    "Value",
    "PrimitiveValue",
    "ListValue",
    "ObjectField",
    "ObjectValue",
    "NullValue",
    "Variable",
    "Argument",
    "ArgumentList",
    "Directive",
    "DirectiveList",
    "unquote",
]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


class TokenKind(Enum):
    """Lexical kind of a primitive literal."""

    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    IDENT = "Ident"


@dataclass
class Ident:
    """A name together with where it appeared."""

    name: str
    loc: Location = field(default_factory=Location)


class Value(ABC):
    """A literal input value or default value."""

    loc: Location

    @abstractmethod
    def deserialize(self, variables: Mapping[str, Any] | None = None) -> Any:
        """Turn the literal into a plain Python value."""

    @abstractmethod
    def __str__(self) -> str:
        """Serialise the literal in GraphQL syntax."""


@dataclass
class PrimitiveValue(Value):
    """An Int, Float, String, Boolean or enum literal."""

    kind: TokenKind
    text: str
    loc: Location = field(default_factory=Location)

    def deserialize(self, variables: Mapping[str, Any] | None = None) -> Any:
        if self.kind is TokenKind.INT:
            if not _INT_RE.fullmatch(self.text):
                raise ValueError(f"invalid Int literal: {self.text!r}")
            number = int(self.text)
            if not _INT32_MIN <= number <= _INT32_MAX:
                raise ValueError(f"Int literal out of range: {self.text}")
            return number
        if self.kind is TokenKind.FLOAT:
            if self.text != self.text.strip() or "_" in self.text:
                raise ValueError(f"invalid Float literal: {self.text!r}")
            return float(self.text)
        if self.kind is TokenKind.STRING:
            return unquote(self.text)
        if self.kind is TokenKind.IDENT:
            if self.text == "true":
                return True
            if self.text == "false":
                return False
            return self.text
        raise ValueError("invalid literal value")

    def __str__(self) -> str:
        return self.text


@dataclass
class ListValue(Value):
    """A list literal."""

    values: list[Value] = field(default_factory=list)
    loc: Location = field(default_factory=Location)

    def deserialize(self, variables: Mapping[str, Any] | None = None) -> list[Any]:
        return [entry.deserialize(variables) for entry in self.values]

    def __str__(self) -> str:
        return "[" + ", ".join(str(entry) for entry in self.values) + "]"


@dataclass
class ObjectField:
    """A name/value pair inside an object literal."""

    name: Ident
    value: Value


@dataclass
class ObjectValue(Value):
    """An object literal."""

    fields: list[ObjectField] = field(default_factory=list)
    loc: Location = field(default_factory=Location)

    def deserialize(
        self, variables: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return {f.name.name: f.value.deserialize(variables) for f in self.fields}

    def __str__(self) -> str:
        return "{" + ", ".join(f"{f.name.name}: {f.value}" for f in self.fields) + "}"


@dataclass
class NullValue(Value):
    """The ``null`` literal."""

    loc: Location = field(default_factory=Location)

    def deserialize(self, variables: Mapping[str, Any] | None = None) -> None:
        return None

    def __str__(self) -> str:
        return "null"


@dataclass
class Variable(Value):
    """A reference to an operation variable."""

    name: str
    loc: Location = field(default_factory=Location)

    def deserialize(self, variables: Mapping[str, Any] | None = None) -> Any:
        if not variables:
            return None
        return variables.get(self.name)

    def __str__(self) -> str:
        return "$" + self.name


@dataclass
class Argument:
    """An argument passed to a field or directive."""

    name: Ident
    value: Value
    directives: DirectiveList = field(default_factory=lambda: DirectiveList())


class ArgumentList(list):
    """An ordered collection of arguments."""

    def get(self, name: str) -> Value | None:
        """Return the value of the named argument, or None."""
        return next((arg.value for arg in self if arg.name.name == name), None)

    def must_get(self, name: str) -> Value:
        """Return the value of the named argument or raise KeyError."""
        value = self.get(name)
        if value is None:
            raise KeyError("argument not found")
        return value


@dataclass
class Directive:
    """A directive applied to a part of a document."""

    name: Ident
    arguments: ArgumentList = field(default_factory=ArgumentList)


class DirectiveList(list):
    """An ordered collection of directives."""

    def get(self, name: str) -> Directive | None:
        """Return the named directive, or None."""
        return next((d for d in self if d.name.name == name), None)


_SIMPLE_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
    "\\": 0x5C,
}
_HEX_WIDTH = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS = set("0123456789abcdefABCDEF")
_OCT_DIGITS = set("01234567")


def _syntax_error() -> ValueError:
    return ValueError("invalid syntax")


def unquote(text: str) -> str:
    """Interpret a double-quoted, single-quoted or back-quoted literal."""
    if len(text) < 2:
        raise _syntax_error()
    quote = text[0]
    if quote not in "\"'`" or text[-1] != quote:
        raise _syntax_error()
    body = text[1:-1]

    if quote == "`":
        if "`" in body:
            raise _syntax_error()
        return body.replace("\r", "")
    if "\n" in body:
        raise _syntax_error()

    out = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char == quote:
            raise _syntax_error()
        if char != "\\":
            out += char.encode("utf-8", "surrogateescape")
            i += 1
            continue
        if i + 1 >= len(body):
            raise _syntax_error()
        escape = body[i + 1]
        i += 2
        if escape in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[escape])
        elif escape == quote:
            out += quote.encode()
        elif escape in _HEX_WIDTH:
            width = _HEX_WIDTH[escape]
            digits = body[i : i + width]
            if len(digits) != width or not set(digits) <= _HEX_DIGITS:
                raise _syntax_error()
            i += width
            code = int(digits, 16)
            if escape == "x":
                out.append(code)
            else:
                if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                    raise _syntax_error()
                out += chr(code).encode("utf-8")
        elif escape in _OCT_DIGITS:
            digits = body[i - 1 : i + 2]
            if len(digits) != 3 or not set(digits) <= _OCT_DIGITS:
                raise _syntax_error()
            code = int(digits, 8)
            if code > 0xFF:
                raise _syntax_error()
            out.append(code)
            i += 2
        else:
            raise _syntax_error()

    result = out.decode("utf-8", "surrogateescape")
    if quote == "'" and len(result) != 1:
        raise _syntax_error()
    return result