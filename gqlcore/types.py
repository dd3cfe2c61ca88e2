"""Type system and executable document definitions of a GraphQL schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from gqlcore.errors import Location
from gqlcore.values import ArgumentList, DirectiveList, Ident, Value

__all__ = [
    "TypeName",
    "ListType",
    "NonNull",
    "ScalarTypeDefinition",
    "EnumValueDefinition",
    "EnumTypeDefinition",
    "InputValueDefinition",
    "InputValueDefinitionList",
    "ArgumentsDefinition",
    "InputObject",
    "FieldDefinition",
    "FieldsDefinition",
    "ObjectTypeDefinition",
    "InterfaceTypeDefinition",
    "Union",
    "DirectiveDefinition",
    "Extension",
    "Selection",
    "Fragment",
    "InlineFragment",
    "FragmentDefinition",
    "FragmentSpread",
    "FragmentList",
    "Field",
    "OperationType",
    "OperationDefinition",
    "OperationList",
    "ExecutableDefinition",
    "SchemaDefinition",
    "Schema",
]

_UNRESOLVED = "TypeName needs to be resolved to actual type"


def _empty_ident() -> Ident:
    return Ident("")


@dataclass
class TypeName:
    """A reference to a named type that has not been resolved yet."""

    name: str
    loc: Location = field(default_factory=Location)

    @property
    def kind(self) -> str:
        raise TypeError(_UNRESOLVED)

    def __str__(self) -> str:
        raise TypeError(_UNRESOLVED)


@dataclass
class ListType:
    """A list type such as ``[Foo]``."""

    of_type: Any

    @property
    def kind(self) -> str:
        return "LIST"

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass
class NonNull:
    """A non-null type such as ``Foo!``."""

    of_type: Any

    @property
    def kind(self) -> str:
        return "NON_NULL"

    def __str__(self) -> str:
        return f"{self.of_type}!"


class _NamedType:
    """Behaviour shared by every named type definition."""

    _KIND: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        return self._KIND

    @property
    def type_name(self) -> str:
        return self.name  # type: ignore[attr-defined]

    @property
    def description(self) -> str:
        return self.desc  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return self.name  # type: ignore[attr-defined]


@dataclass(eq=False)
class ScalarTypeDefinition(_NamedType):
    """A scalar leaf type."""

    _KIND: ClassVar[str] = "SCALAR"

    name: str
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


@dataclass
class EnumValueDefinition:
    """One value of an enum type."""

    enum_value: str
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = field(default_factory=Location)


@dataclass(eq=False)
class EnumTypeDefinition(_NamedType):
    """An enum type with its set of possible values."""

    _KIND: ClassVar[str] = "ENUM"

    name: str
    enum_values_definition: list[EnumValueDefinition] = field(default_factory=list)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


@dataclass
class InputValueDefinition:
    """An argument or input field definition."""

    name: Ident
    type: Any = None
    default: Value | None = None
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)
    type_loc: Location = field(default_factory=Location)


class InputValueDefinitionList(list):
    """An ordered collection of input value definitions."""

    def get(self, name: str) -> InputValueDefinition | None:
        """Return the named definition, or None."""
        return next((v for v in self if v.name.name == name), None)


class ArgumentsDefinition(InputValueDefinitionList):
    """The arguments declared by a field or directive."""

    def get(self, name: str) -> InputValueDefinition | None:
        """Return the named argument definition, or None."""
        return next((arg for arg in self if arg.name.name == name), None)


@dataclass(eq=False)
class InputObject(_NamedType):
    """An input object type."""

    _KIND: ClassVar[str] = "INPUT_OBJECT"

    name: str
    desc: str = ""
    values: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


@dataclass(eq=False)
class FieldDefinition:
    """A field declared on an object or interface type."""

    name: str
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    type: Any = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = field(default_factory=Location)


class FieldsDefinition(list):
    """The fields of an object or interface type."""

    def get(self, name: str) -> FieldDefinition | None:
        """Return the named field, or None."""
        return next((f for f in self if f.name == name), None)

    def names(self) -> list[str]:
        """Return the field names in order."""
        return [f.name for f in self]


@dataclass(eq=False)
class ObjectTypeDefinition(_NamedType):
    """An object type."""

    _KIND: ClassVar[str] = "OBJECT"

    name: str
    interfaces: list[InterfaceTypeDefinition] = field(
        default_factory=list, repr=False
    )
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    interface_names: list[str] = field(default_factory=list)
    loc: Location = field(default_factory=Location)


@dataclass(eq=False)
class InterfaceTypeDefinition(_NamedType):
    """An interface type."""

    _KIND: ClassVar[str] = "INTERFACE"

    name: str
    possible_types: list[ObjectTypeDefinition] = field(
        default_factory=list, repr=False
    )
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)
    interfaces: list[InterfaceTypeDefinition] = field(
        default_factory=list, repr=False
    )


@dataclass(eq=False)
class Union(_NamedType):
    """A union of object types."""

    _KIND: ClassVar[str] = "UNION"

    name: str
    union_member_types: list[ObjectTypeDefinition] = field(
        default_factory=list, repr=False
    )
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    type_names: list[str] = field(default_factory=list)
    loc: Location = field(default_factory=Location)


@dataclass
class DirectiveDefinition:
    """A directive declared in the schema."""

    name: str
    desc: str = ""
    repeatable: bool = False
    locations: list[str] = field(default_factory=list)
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    loc: Location = field(default_factory=Location)


@dataclass
class Extension:
    """An extension of an existing type."""

    type: Any
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


class Selection:
    """Marker base for the members of a selection set."""


@dataclass(kw_only=True)
class Fragment:
    """A type condition with its selections."""

    on: TypeName = field(default_factory=lambda: TypeName(""))
    selections: list[Selection] = field(default_factory=list)


@dataclass(kw_only=True)
class InlineFragment(Fragment, Selection):
    """A fragment written inline in a selection set."""

    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


@dataclass(kw_only=True)
class FragmentDefinition(Fragment):
    """A named fragment."""

    name: Ident = field(default_factory=_empty_ident)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


@dataclass(kw_only=True)
class FragmentSpread(Selection):
    """A use of a named fragment."""

    name: Ident = field(default_factory=_empty_ident)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


class FragmentList(list):
    """An ordered collection of fragment definitions."""

    def get(self, name: str) -> FragmentDefinition | None:
        """Return the named fragment, or None."""
        return next((f for f in self if f.name.name == name), None)


@dataclass(kw_only=True)
class Field(Selection):
    """A field requested in an operation."""

    alias: Ident = field(default_factory=_empty_ident)
    name: Ident = field(default_factory=_empty_ident)
    arguments: ArgumentList = field(default_factory=ArgumentList)
    directives: DirectiveList = field(default_factory=DirectiveList)
    selection_set: list[Selection] = field(default_factory=list)
    selection_set_loc: Location = field(default_factory=Location)


class OperationType(str, Enum):
    """The kind of an operation."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"

    def __str__(self) -> str:
        return self.value


@dataclass
class OperationDefinition:
    """A query, mutation or subscription."""

    type: OperationType
    name: Ident = field(default_factory=_empty_ident)
    vars: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    selections: list[Selection] = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


class OperationList(list):
    """An ordered collection of operations."""

    def get(self, name: str) -> OperationDefinition | None:
        """Return the named operation, or None."""
        return next((op for op in self if op.name.name == name), None)


@dataclass
class ExecutableDefinition:
    """The operations and fragments of a request document."""

    operations: OperationList = field(default_factory=OperationList)
    fragments: FragmentList = field(default_factory=FragmentList)


@dataclass
class SchemaDefinition:
    """The optional ``schema { ... }`` block."""

    present: bool = False
    root_operation_types: dict[str, Any] = field(default_factory=dict)
    entry_point_names: dict[str, str] = field(default_factory=dict)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=Location)


@dataclass
class Schema:
    """The type system of a GraphQL service."""

    definition: SchemaDefinition = field(default_factory=SchemaDefinition)
    types: dict[str, Any] = field(default_factory=dict)
    directives: dict[str, DirectiveDefinition] = field(default_factory=dict)
    objects: list[ObjectTypeDefinition] = field(default_factory=list)
    unions: list[Union] = field(default_factory=list)
    enums: list[EnumTypeDefinition] = field(default_factory=list)
    extensions: list[Extension] = field(default_factory=list)
    schema_string: str = ""

    def resolve(self, name: str) -> Any:
        """Return the named type, or None if the schema has no such type."""
        return self.types.get(name)