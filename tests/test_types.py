import pytest

from gqlcore.errors import Location
from gqlcore.types import (
    ArgumentsDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    ExecutableDefinition,
    Field,
    FieldDefinition,
    FieldsDefinition,
    FragmentDefinition,
    FragmentList,
    FragmentSpread,
    InlineFragment,
    InputObject,
    InputValueDefinition,
    InputValueDefinitionList,
    InterfaceTypeDefinition,
    ListType,
    NonNull,
    ObjectTypeDefinition,
    OperationDefinition,
    OperationList,
    OperationType,
    ScalarTypeDefinition,
    Schema,
    SchemaDefinition,
    Selection,
    TypeName,
    Union,
)
from gqlcore.values import Ident

_UNRESOLVED = "TypeName needs to be resolved to actual type"


@pytest.mark.parametrize(
    "definition, kind",
    [
        (ScalarTypeDefinition("Time"), "SCALAR"),
        (EnumTypeDefinition("Episode"), "ENUM"),
        (InputObject("ReviewInput"), "INPUT_OBJECT"),
        (ObjectTypeDefinition("Human"), "OBJECT"),
        (InterfaceTypeDefinition("Character"), "INTERFACE"),
        (Union("SearchResult"), "UNION"),
    ],
)
def test_named_type_kind_and_name(definition, kind):
    assert definition.kind == kind
    assert definition.type_name == definition.name
    assert str(definition) == definition.name


def test_named_type_description():
    scalar = ScalarTypeDefinition("Time", desc="A point in time.")
    assert scalar.description == "A point in time."


def test_wrapping_types_kinds():
    scalar = ScalarTypeDefinition("String")
    assert ListType(scalar).kind == "LIST"
    assert NonNull(scalar).kind == "NON_NULL"


def test_wrapping_types_serialise():
    scalar = ScalarTypeDefinition("String")
    assert str(NonNull(ListType(NonNull(scalar)))) == "[String!]!"


def test_list_of_type_is_kept():
    inner = EnumTypeDefinition("Episode")
    wrapped = ListType(inner)
    assert wrapped.of_type is inner


def test_type_name_kind_must_be_resolved():
    ref = TypeName("Foo")
    with pytest.raises(TypeError) as info:
        ref.kind
    assert str(info.value) == _UNRESOLVED
    assert ref.name == "Foo"


def test_type_name_string_must_be_resolved():
    ref = TypeName("Foo")
    with pytest.raises(TypeError) as info:
        str(ref)
    assert str(info.value) == _UNRESOLVED
    assert ref.name == "Foo"


def test_fields_definition_get_and_names():
    fields = FieldsDefinition([FieldDefinition("id"), FieldDefinition("name")])
    assert fields.get("name") is fields[1]
    assert fields.get("missing") is None
    assert fields.names() == ["id", "name"]


def test_fields_definition_names_empty():
    assert FieldsDefinition().names() == []


def test_arguments_definition_get():
    first = InputValueDefinition(Ident("first"))
    after = InputValueDefinition(Ident("after"))
    args = ArgumentsDefinition([first, after])
    assert args.get("after") is after
    assert args.get("last") is None


def test_input_value_definition_list_get():
    value = InputValueDefinition(Ident("stars"), desc="0-5 stars")
    values = InputValueDefinitionList([value])
    assert values.get("stars").desc == "0-5 stars"
    assert values.get("commentary") is None


def test_fragment_list_get():
    frag = FragmentDefinition(name=Ident("heroFields"), on=TypeName("Character"))
    frags = FragmentList([frag])
    assert frags.get("heroFields") is frag
    assert frags.get("other") is None


def test_operation_list_get():
    op = OperationDefinition(OperationType.QUERY, name=Ident("Hello"))
    ops = OperationList([op])
    assert ops.get("Hello") is op
    assert ops.get("Bye") is None


def test_operation_type_values():
    assert OperationType("subscription") is OperationType.SUBSCRIPTION
    assert str(OperationType.MUTATION) == "mutation"


def test_selections_are_selection():
    field_selection = Field(name=Ident("hero"))
    inline = InlineFragment(on=TypeName("Human"))
    spread = FragmentSpread(name=Ident("heroFields"))
    assert [isinstance(s, Selection) for s in (field_selection, inline, spread)] == [
        True,
        True,
        True,
    ]
    assert isinstance(FragmentDefinition(), Selection) is False
    assert inline.on.name == "Human"
    assert spread.name.name == "heroFields"


def test_field_selection_set_nesting():
    child = Field(name=Ident("name"))
    parent = Field(name=Ident("hero"), selection_set=[child])
    assert parent.selection_set[0].name.name == "name"
    assert parent.alias.name == ""


def test_executable_definition_lookup():
    op = OperationDefinition(OperationType.QUERY, name=Ident("Q"))
    doc = ExecutableDefinition(operations=OperationList([op]))
    assert doc.operations.get("Q") is op
    assert doc.fragments.get("Q") is None


def test_enum_values_order():
    enum = EnumTypeDefinition(
        "Episode",
        enum_values_definition=[
            EnumValueDefinition("NEWHOPE"),
            EnumValueDefinition("EMPIRE"),
            EnumValueDefinition("JEDI"),
        ],
    )
    assert [v.enum_value for v in enum.enum_values_definition] == [
        "NEWHOPE",
        "EMPIRE",
        "JEDI",
    ]


def test_schema_resolve():
    query = ObjectTypeDefinition("Query")
    schema = Schema(
        definition=SchemaDefinition(present=True, root_operation_types={"query": query}),
        types={"Query": query},
    )
    assert schema.resolve("Query") is query
    assert schema.resolve("Mutation") is None
    assert schema.definition.root_operation_types["query"] is query


def test_cyclic_definitions_have_repr():
    iface = InterfaceTypeDefinition("Character")
    obj = ObjectTypeDefinition("Human", interfaces=[iface])
    iface.possible_types.append(obj)
    assert "Human" in repr(obj)
    assert iface.possible_types[0].interfaces[0] is iface


def test_locations_default():
    scalar = ScalarTypeDefinition("Time")
    assert scalar.loc == Location(0, 0)