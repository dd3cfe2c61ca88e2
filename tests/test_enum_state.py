import pytest

from gqlcore.enum_state import (
    Resolver,
    State,
    parse_state,
    unmarshal_state,
)


def test_string_names():
    names = ["BACKLOG", "TODO", "INPROG", "DONE"]
    parsed = [parse_state(name) for name in names]
    assert parsed == list(State)
    assert [str(state) for state in parsed] == names


@pytest.mark.parametrize("state", list(State))
def test_parse_round_trip(state):
    assert parse_state(str(state)) is state
    assert unmarshal_state(str(state)) is state


def test_parse_invalid():
    with pytest.raises(ValueError, match="invalid value for enum State: LATER"):
        parse_state("LATER")


def test_unmarshal_wrong_type():
    with pytest.raises(TypeError, match="wrong type for State: int"):
        unmarshal_state(3)


def test_implements_graphql_type():
    assert State.TODO.implements_graphql_type("State")
    assert not State.TODO.implements_graphql_type("Role")


def test_resolver_default_and_mutation():
    root = Resolver()
    assert root.query().state(None) is State.BACKLOG
    assert root.mutation().state(None, State.DONE) is State.DONE
    assert root.query().state(None) is State.DONE
    assert root.mutation().state(None, "INPROG") is State.INPROG
    assert root.query().state(None) is State.INPROG


def test_mutation_rejects_bad_input():
    root = Resolver()
    with pytest.raises(ValueError):
        root.mutation().state(None, "NOPE")
    assert root.query().state(None) is State.BACKLOG