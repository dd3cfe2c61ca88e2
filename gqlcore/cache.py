"""Cache-control hints that resolvers attach to a request."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Mapping

__all__ = ["Scope", "Hint", "HintCollector", "add_hint", "hintable"]

_HINTS_KEY = "gqlcore.cache.hints"


class Scope(Enum):
    """Who may cache a response."""

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class Hint:
    """How long, and by whom, something may be cached."""

    max_age: timedelta | None = None
    scope: Scope = Scope.PUBLIC

    def __str__(self) -> str:
        """Return the HTTP Cache-Control value of the hint."""
        if self.max_age is None:
            raise ValueError("hint has no max age")
        return f"{self.scope.value}, max-age={int(self.max_age.total_seconds())}"


class HintCollector:
    """Gathers the hints given while a request is resolved."""

    def __init__(self) -> None:
        self._hints: list[Hint] = []
        self._lock = threading.Lock()

    def add(self, hint: Hint) -> None:
        """Record a hint."""
        with self._lock:
            self._hints.append(hint)

    def resolve(self) -> Hint:
        """Combine the hints: the shortest max age, private if any is private."""
        with self._lock:
            hints = list(self._hints)
        scope = Scope.PUBLIC
        min_age: timedelta | None = None
        for hint in hints:
            if hint.scope is Scope.PRIVATE:
                scope = Scope.PRIVATE
            if hint.max_age is not None and (min_age is None or hint.max_age < min_age):
                min_age = hint.max_age
        return Hint(max_age=min_age if min_age is not None else timedelta(0), scope=scope)


def add_hint(ctx: Mapping[str, Any] | None, hint: Hint) -> None:
    """Record a hint in the request context, if it collects hints."""
    collector = ctx.get(_HINTS_KEY) if ctx else None
    if isinstance(collector, HintCollector):
        collector.add(hint)


def hintable(ctx: Mapping[str, Any] | None = None) -> tuple[dict[str, Any], HintCollector]:
    """Return a context that collects hints, and the collector behind it."""
    collector = HintCollector()
    hint_ctx = dict(ctx or {})
    hint_ctx[_HINTS_KEY] = collector
    return hint_ctx, collector