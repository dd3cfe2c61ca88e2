"""A schema guarded by a role-checking directive."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from gqlcore.users import from_context

__all__ = ["SCHEMA", "HasRoleDirective", "Resolver"]

SCHEMA = """
	schema {
		query: Query
	}

	directive @hasRole(role: Role!) on FIELD_DEFINITION

	type Query {
		publicGreet(name: String!): String!
		privateGreet(name: String!): String! @hasRole(role: ADMIN)
	}

	enum Role {
		ADMIN
		USER
	}
"""


@dataclass
class HasRoleDirective:
    """Rejects a request unless the user in the context has the role."""

    role: str = ""

    def implements_directive(self) -> str:
        return "hasRole"

    def validate(self, ctx: Mapping[str, Any] | None, args: Any) -> None:
        user = from_context(ctx)
        if user is None:
            raise PermissionError("user not provided in cotext")
        role = self.role.lower()
        if not user.has_role(role):
            raise PermissionError(f"access denied, {json.dumps(role)} role required")


class Resolver:
    """Root query resolver."""

    def public_greet(self, ctx: Mapping[str, Any] | None, name: str) -> str:
        return f"Hello from the public resolver, {name}!"

    def private_greet(self, ctx: Mapping[str, Any] | None, name: str) -> str:
        return f"Hi from the protected resolver, {name}!"