"""A type-safe enum backing the GraphQL ``State`` enum."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

__all__ = ["State", "parse_state", "unmarshal_state", "Resolver", "QueryResolver", "MutationResolver"]


class State(IntEnum):
    """Workflow state of an item; BACKLOG is the default."""

    BACKLOG = 0
    TODO = 1
    INPROG = 2
    DONE = 3

    def __str__(self) -> str:
        return self.name

    def implements_graphql_type(self, name: str) -> bool:
        """Return True for the GraphQL enum this type represents."""
        return name == "State"


def parse_state(value: str) -> State:
    """Return the State named ``value``."""
    try:
        return State[value]
    except KeyError:
        raise ValueError("invalid value for enum State: " + value) from None


def unmarshal_state(value: Any) -> State:
    """Convert a GraphQL input value into a State."""
    if not isinstance(value, str):
        raise TypeError(f"wrong type for State: {type(value).__name__}")
    return parse_state(value)


class Resolver:
    """Root resolver holding the current state."""

    def __init__(self, current: State = State.BACKLOG) -> None:
        self.current = current

    def query(self) -> QueryResolver:
        return QueryResolver(self)

    def mutation(self) -> MutationResolver:
        return MutationResolver(self)


class QueryResolver:
    """Reads the current state."""

    def __init__(self, root: Resolver) -> None:
        self._root = root

    def state(self, ctx: Any) -> State:
        return self._root.current


class MutationResolver:
    """Changes the current state."""

    def __init__(self, root: Resolver) -> None:
        self._root = root

    def state(self, ctx: Any, state: State | str) -> State:
        if not isinstance(state, State):
            state = unmarshal_state(state)
        self._root.current = state
        return state