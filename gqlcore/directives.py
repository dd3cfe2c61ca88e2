"""Interfaces for schema directives and custom scalar unmarshalling."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "Directive",
    "Resolver",
    "ResolverInterceptor",
    "Validator",
    "Unmarshaler",
]


@runtime_checkable
class Directive(Protocol):
    """A custom schema directive.

    Implementations also provide at least one of the optional behaviours:
    ResolverInterceptor or Validator.
    """

    @abstractmethod
    def implements_directive(self) -> str:
        """Return the name of the directive in the schema."""


@runtime_checkable
class Resolver(Protocol):
    """Resolves a field during execution of a request."""

    @abstractmethod
    def resolve(self, ctx: Any, args: Any) -> Any:
        """Return the field's value or raise on failure."""


@runtime_checkable
class ResolverInterceptor(Protocol):
    """Wraps a field resolver to apply directive logic."""

    @abstractmethod
    def resolve(self, ctx: Any, args: Any, next_resolver: Resolver) -> Any:
        """Return the field's value, usually by calling ``next_resolver``."""


@runtime_checkable
class Validator(Protocol):
    """Runs before anything is resolved and may reject the request."""

    @abstractmethod
    def validate(self, ctx: Any, args: Any) -> None:
        """Raise an exception to reject the request."""


@runtime_checkable
class Unmarshaler(Protocol):
    """A Python type mapped to a custom GraphQL scalar."""

    @abstractmethod
    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type represents the named GraphQL scalar."""

    @abstractmethod
    def unmarshal_graphql(self, value: Any) -> None:
        """Set this object from an input value, raising if it is unsuitable."""