"""A small schema whose resolvers give cache-control hints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping

from gqlcore.cache import Hint, Scope, add_hint

__all__ = ["SCHEMA", "UserProfile", "Resolver"]

SCHEMA = """
	schema {
		query: Query
	}

	type Query {
		hello(name: String!): String!
		me: UserProfile!
	}

	type UserProfile {
		name: String!
	}
"""


@dataclass(frozen=True)
class UserProfile:
    """The profile of the current user."""

    name: str


class Resolver:
    """Root query resolver."""

    def hello(self, ctx: Mapping[str, Any] | None, name: str) -> str:
        add_hint(ctx, Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self, ctx: Mapping[str, Any] | None) -> UserProfile:
        add_hint(ctx, Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))
        return UserProfile(name="World")