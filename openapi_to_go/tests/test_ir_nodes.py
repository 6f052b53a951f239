#!/usr/bin/env python3

import pytest

from openapi_to_go.pipeline.analyzer.ir_nodes import (
    EnumDefinition,
    GoSchema,
    Property,
    SchemaKind,
    TypeDefinition,
)
from openapi_to_go.pipeline.errors import PropertyConflictError


def primitive(go_type):
    return GoSchema(kind=SchemaKind.PRIMITIVE, go_type=go_type)


def reference(name):
    return GoSchema(kind=SchemaKind.REFERENCE, ref_type=name)


class TestGoSchema:
    """Test GoSchema invariants and helpers"""

    def test_reference_requires_name(self):
        with pytest.raises(ValueError):
            GoSchema(kind=SchemaKind.REFERENCE)

    def test_only_references_have_names(self):
        with pytest.raises(ValueError):
            GoSchema(kind=SchemaKind.PRIMITIVE, go_type="string", ref_type="Name")

    def test_array_requires_element(self):
        with pytest.raises(ValueError):
            GoSchema(kind=SchemaKind.ARRAY, go_type="[]string")

    def test_type_decl(self):
        assert primitive("int").type_decl() == "int"
        assert reference("Pet").type_decl() == "Pet"

    def test_add_property(self):
        schema = GoSchema(kind=SchemaKind.OBJECT)
        schema.add_property(Property(json_field_name="name", schema=primitive("string")))
        schema.add_property(Property(json_field_name="name", schema=primitive("string")))
        assert len(schema.properties) == 1

        with pytest.raises(PropertyConflictError):
            schema.add_property(Property(json_field_name="name", schema=primitive("int")))
        with pytest.raises(PropertyConflictError):
            schema.add_property(Property(json_field_name="name", schema=primitive("string"), required=True))

    def test_additional_type_defs_order(self):
        nested = TypeDefinition(type_name="Inner", schema=primitive("string"))
        own = TypeDefinition(type_name="Own", schema=primitive("string"))
        prop_schema = GoSchema(kind=SchemaKind.REFERENCE, ref_type="Inner", additional_types=[nested])
        schema = GoSchema(
            kind=SchemaKind.OBJECT,
            properties=[Property(json_field_name="inner", schema=prop_schema)],
            additional_types=[own],
        )
        assert [t.type_name for t in schema.get_additional_type_defs()] == ["Inner", "Own"]


class TestProperty:
    """Test property field rendering helpers"""

    def test_pointer_rules(self):
        assert Property(schema=primitive("string"), required=True).go_type_def() == "string"
        assert Property(schema=primitive("string")).go_type_def() == "*string"
        assert Property(schema=primitive("string"), required=True, nullable=True).go_type_def() == "*string"
        assert Property(schema=primitive("string"), required=True, read_only=True).go_type_def() == "*string"

    def test_skip_optional_pointer(self):
        schema = GoSchema(kind=SchemaKind.PRIMITIVE, go_type="json.RawMessage", skip_optional_pointer=True)
        assert Property(schema=schema).go_type_def() == "json.RawMessage"

    def test_go_field_name(self):
        assert Property(json_field_name="owner_id").go_field_name() == "OwnerID"
        assert Property(json_field_name="x", extensions={"x-go-name": "Custom"}).go_field_name() == "Custom"
        assert Property(json_field_name="x", extensions={"x-go-name": 3}).go_field_name() == "X"


class TestDefinitions:
    """Test type and enum definitions"""

    def test_can_alias(self):
        assert TypeDefinition(schema=reference("Pet")).can_alias()
        assert TypeDefinition(schema=GoSchema(kind=SchemaKind.ARRAY, go_type="[]Pet", array_type=reference("Pet"))).can_alias()
        assert not TypeDefinition(schema=primitive("string")).can_alias()

    def test_enum_constants_quoting(self):
        schema = GoSchema(kind=SchemaKind.PRIMITIVE, go_type="string", enum_values={"QuoteSay": 'say "hi"'})
        assert EnumDefinition(type_name="Quote", schema=schema, value_wrapper='"').constants() == [("QuoteSay", '"say \\"hi\\""')]

        schema = GoSchema(kind=SchemaKind.PRIMITIVE, go_type="int", enum_values={"LevelN1": "1"})
        assert EnumDefinition(type_name="Level", schema=schema).constants() == [("LevelN1", "1")]
