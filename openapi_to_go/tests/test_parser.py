from unittest import TestCase

from openapi_to_go.pipeline.schema_ast import SchemaParser


class TestSchemaParser(TestCase):
    """Test parsing of decoded documents into input nodes"""

    def setUp(self):
        self.parser = SchemaParser()

    def test_absent_schema(self):
        self.assertIsNone(self.parser.parse_schema_ref(None))

    def test_reference_without_siblings(self):
        sref = self.parser.parse_schema_ref({"$ref": "#/components/schemas/Pet"})
        self.assertEqual(sref.ref, "#/components/schemas/Pet")
        self.assertIsNone(sref.value)

    def test_reference_with_siblings(self):
        sref = self.parser.parse_schema_ref({"$ref": "#/components/schemas/Pet", "description": "The owner"})
        self.assertEqual(sref.value.description, "The owner")

    def test_nested_schema(self):
        sref = self.parser.parse_schema_ref(
            {
                "type": "object",
                "required": ["id"],
                "properties": {
                    "id": {"type": "integer", "format": "int64"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
            },
            "#/components/schemas/Pet",
        )
        schema = sref.value
        self.assertEqual(schema.type, "object")
        self.assertEqual(schema.required, ["id"])
        self.assertEqual(schema.properties["id"].value.format, "int64")
        self.assertEqual(schema.properties["tags"].value.items.value.type, "string")
        self.assertEqual(schema.properties["tags"].value.source_path, "#/components/schemas/Pet/properties/tags")

    def test_nullable_type_list(self):
        schema = self.parser.parse_schema_ref({"type": ["string", "null"]}).value
        self.assertEqual(schema.type, "string")
        self.assertTrue(schema.nullable)

    def test_additional_properties(self):
        self.assertTrue(self.parser.parse_schema_ref({"additionalProperties": True}).value.has_additional_properties())
        self.assertFalse(self.parser.parse_schema_ref({"additionalProperties": False}).value.has_additional_properties())
        self.assertFalse(self.parser.parse_schema_ref({"type": "object"}).value.has_additional_properties())

        schema = self.parser.parse_schema_ref({"additionalProperties": {"type": "integer"}}).value
        self.assertTrue(schema.has_additional_properties())
        self.assertEqual(schema.additional_properties.value.type, "integer")

    def test_composition_lists(self):
        schema = self.parser.parse_schema_ref({"allOf": [{"$ref": "#/components/schemas/A"}, {"type": "object"}]}).value
        self.assertEqual(len(schema.all_of), 2)
        self.assertEqual(schema.all_of[0].ref, "#/components/schemas/A")
        self.assertEqual(schema.any_of, [])

    def test_extensions(self):
        schema = self.parser.parse_schema_ref({"type": "string", "x-go-type": "uuid.UUID", "format": "uuid"}).value
        self.assertEqual(schema.extensions, {"x-go-type": "uuid.UUID"})

    def test_parse_document(self):
        document = self.parser.parse_document(
            {
                "components": {
                    "schemas": {"Pet": {"type": "object"}},
                    "parameters": {
                        "limit": {"name": "limit", "in": "query", "required": True, "schema": {"type": "integer"}},
                        "shared": {"$ref": "common.json#/components/parameters/shared"},
                        "filter": {"name": "filter", "in": "query", "content": {"application/json": {"schema": {"type": "object"}}}},
                    },
                }
            }
        )
        self.assertEqual(list(document.schemas), ["Pet"])
        self.assertEqual(sorted(document.parameters), ["filter", "limit"])
        self.assertEqual(document.parameters["limit"].location, "query")
        self.assertTrue(document.parameters["limit"].required)
        self.assertEqual(document.parameters["filter"].content["application/json"].schema.value.type, "object")

    def test_parse_document_without_components(self):
        document = self.parser.parse_document({"openapi": "3.0.0"})
        self.assertEqual(document.schemas, {})
        self.assertEqual(document.parameters, {})
