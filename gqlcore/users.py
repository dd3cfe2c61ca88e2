"""A simple user with roles that travels in the request context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["User", "add_to_context", "from_context"]

_CONTEXT_KEY = "gqlcore.users.user"


@dataclass
class User:
    """A user and the roles given to them."""

    id: str = ""
    roles: set[str] = field(default_factory=set)

    def add_role(self, role: str) -> None:
        self.roles.add(role)

    def has_role(self, role: str) -> bool:
        return role in self.roles


def add_to_context(ctx: Mapping[str, Any] | None, user: User) -> dict[str, Any]:
    """Return a copy of the context that carries ``user``."""
    new_ctx = dict(ctx or {})
    new_ctx[_CONTEXT_KEY] = user
    return new_ctx


def from_context(ctx: Mapping[str, Any] | None) -> User | None:
    """Return the user carried by the context, or None."""
    user = ctx.get(_CONTEXT_KEY) if ctx else None
    return user if isinstance(user, User) else None