"""Query errors, source locations and panic handling."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Location",
    "QueryError",
    "errorf",
    "PanicHandler",
    "DefaultPanicHandler",
]


@dataclass(frozen=True)
class Location:
    """A line/column position in a GraphQL document."""

    line: int = 0
    column: int = 0

    def before(self, other: Location) -> bool:
        """Return True if this location comes strictly before ``other``."""
        return self.line < other.line or (
            self.line == other.line and self.column < other.column
        )

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


class QueryError(Exception):
    """An error reported while parsing, validating or executing a query."""

    def __init__(
        self,
        message: str = "",
        *,
        err: BaseException | None = None,
        locations: list[Location] | None = None,
        path: list[Any] | None = None,
        rule: str = "",
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.err = err
        self.locations = list(locations) if locations else []
        self.path = list(path) if path else []
        self.rule = rule
        self.resolver_error = resolver_error
        self.extensions = dict(extensions) if extensions else {}
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def __repr__(self) -> str:
        return f"QueryError({self.message!r})"

    def unwrap(self) -> BaseException | None:
        """Return the underlying error, if any."""
        return self.err

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serialisable form, omitting empty members."""
        result: dict[str, Any] = {"message": self.message}
        if self.locations:
            result["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path:
            result["path"] = list(self.path)
        if self.extensions:
            result["extensions"] = dict(self.extensions)
        return result


_VERB = re.compile(r"%([%vsdqTx])")


def _render(verb: str, arg: Any) -> str:
    if verb == "T":
        return "<nil>" if arg is None else type(arg).__name__
    if verb == "d":
        if isinstance(arg, bool) or not isinstance(arg, int):
            return f"%!d({_render('v', arg)})"
        return str(arg)
    if verb == "x":
        if isinstance(arg, int) and not isinstance(arg, bool):
            return format(arg, "x")
        if isinstance(arg, (bytes, bytearray)):
            return arg.hex()
        return str(arg).encode("utf-8").hex()
    if verb == "q":
        return json.dumps(_render("v", arg), ensure_ascii=False)
    if arg is None:
        return "<nil>"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, (list, tuple)):
        return "[" + " ".join(_render("v", item) for item in arg) + "]"
    if isinstance(arg, dict):
        items = " ".join(
            f"{_render('v', k)}:{_render('v', v)}" for k, v in arg.items()
        )
        return f"map[{items}]"
    return str(arg)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    remaining = iter(args)
    sentinel = object()

    def replace(match: re.Match[str]) -> str:
        verb = match.group(1)
        if verb == "%":
            return "%"
        arg = next(remaining, sentinel)
        if arg is sentinel:
            return f"%!{verb}(MISSING)"
        return _render(verb, arg)

    text = _VERB.sub(replace, fmt)
    extra = list(remaining)
    if extra:
        rendered = ", ".join(
            f"{type(a).__name__}={_render('v', a)}" for a in extra
        )
        text += f"%!(EXTRA {rendered})"
    return text


def errorf(fmt: str, *args: Any) -> QueryError:
    """Build a QueryError from a format string.

    If the last argument is an exception it becomes the wrapped error.
    """
    err = args[-1] if args and isinstance(args[-1], BaseException) else None
    return QueryError(_format(fmt, args), err=err)


class PanicHandler(ABC):
    """Turns an unexpected failure during execution into a QueryError."""

    @abstractmethod
    def make_panic_error(self, ctx: Any, value: Any) -> QueryError:
        """Create the error reported for ``value``."""


class DefaultPanicHandler(PanicHandler):
    """The default panic handler."""

    def make_panic_error(self, ctx: Any, value: Any) -> QueryError:
        return errorf("panic occurred: %v", value)