# gqlcore

Building blocks for GraphQL services in plain Python. It needs nothing
outside the standard library.

## Contents

- `gqlcore.errors` provides:
  - `QueryError`, an exception with `message`, `locations`, `path`,
    `extensions` and an optional wrapped `err`. Its `to_dict()` leaves out
    empty members.
  - `Location`, which has `before()`.
  - `errorf(fmt, *args)`, which formats messages with `%v`, `%s`, `%d`,
    `%q`, `%x` and `%T`. If the last argument is an exception, it is wrapped.
  - `DefaultPanicHandler`, which turns an unexpected failure into the error
    `panic occurred: ...`.
- `gqlcore.values` provides:
  - The literal input values `PrimitiveValue`, `ListValue`, `ObjectValue`,
    `NullValue` and `Variable`. Each has `deserialize(variables)` and
    GraphQL-syntax `str()`.
  - `ArgumentList` and `DirectiveList`, both with lookup by name.
  - `unquote()` for quoted string literals.
- `gqlcore.types` provides:
  - The type-system tree: `ScalarTypeDefinition`, `EnumTypeDefinition`,
    `InputObject`, `ObjectTypeDefinition`, `InterfaceTypeDefinition`,
    `Union`, `ListType`, `NonNull` and `TypeName`.
  - Field, argument and directive definitions.
  - Operations, fragments and selections.
  - `Schema`, whose `resolve(name)` looks up a type.
- `gqlcore.directives` provides protocols for custom directives and custom
  scalars: `Directive`, `Validator`, `ResolverInterceptor`, `Resolver` and
  `Unmarshaler`.
- Sample data and resolvers:
  - `gqlcore.starwars` has characters, starships, reviews and a cursor-based
    friends connection.
  - `gqlcore.social` has users, paging of friends and search.
  - `gqlcore.cache` and `gqlcore.caching` collect cache-control hints.
  - `gqlcore.users` and `gqlcore.authorization` check roles through a
    `hasRole` directive.
  - `gqlcore.enum_state` has a typed `State` enum.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

Query errors:

```python
from gqlcore.errors import Location, errorf

err = errorf("boom: %s", "shaka")
err.locations.append(Location(line=3, column=7))
print(str(err))        # graphql: boom: shaka (line 3, column 7)
print(err.to_dict())   # {'message': 'boom: shaka', 'locations': [{'line': 3, 'column': 7}]}
```

Deserializing literals:

```python
from gqlcore.values import ListValue, PrimitiveValue, TokenKind, Variable

value = ListValue(values=[PrimitiveValue(TokenKind.INT, "42"), Variable("name")])
print(value.deserialize({"name": "GraphQL"}))  # [42, 'GraphQL']
print(str(value))                              # [42, $name]
```

An Int literal outside the 32-bit range raises `ValueError`.

Collecting cache hints:

```python
from datetime import timedelta
from gqlcore.cache import Hint, Scope, add_hint, hintable

ctx, collector = hintable({})
add_hint(ctx, Hint(max_age=timedelta(hours=1), scope=Scope.PUBLIC))
add_hint(ctx, Hint(max_age=timedelta(minutes=1), scope=Scope.PRIVATE))
print(str(collector.resolve()))  # private, max-age=60
```

The resolved hint takes the shortest max age. Its scope is private if any
hint given was private.

Star Wars resolvers:

```python
from gqlcore.starwars import Resolver

query = Resolver().query()
print(query.hero("EMPIRE").name())        # Luke Skywalker
conn = query.human("1000").friends_connection(first=2)
print(conn.total_count())                 # 4
print(conn.edges()[0].cursor())           # Y3Vyc29yMQ==
print(conn.page_info().has_next_page())   # True
```

Role checks:

```python
from gqlcore.authorization import HasRoleDirective
from gqlcore.users import User, add_to_context

user = User()
user.add_role("admin")
ctx = add_to_context({}, user)
HasRoleDirective(role="ADMIN").validate(ctx, None)  # passes; raises PermissionError otherwise
```

## What it does not do

This package has no GraphQL parser, no validator and no executor. The
sample modules keep their schemas as SDL strings (`SCHEMA`), but nothing in
the package reads them, builds a `Schema` from them or runs queries against
the resolvers. There is no HTTP server or request handler either. The
resolvers are plain Python objects that you call directly.

## Running the tests

```
pytest
```