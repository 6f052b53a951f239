"""
OpenAPI schema parser that builds input nodes.

Phase 1 of the pipeline: turn a decoded OpenAPI document into typed nodes
without resolving references or doing any Go-specific processing.
"""

from __future__ import annotations

import logging
from typing import Any

from .nodes import Document, MediaType, Parameter, Schema, SchemaRef

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses decoded OpenAPI documents into input nodes."""

    def parse_document(self, document: dict[str, Any]) -> Document:
        """
        Parse the components of an OpenAPI document.

        Args:
            document: The decoded OpenAPI document

        Returns:
            Document with component schemas and parameters
        """
        components = document.get("components") or {}
        result = Document()

        for name, schema in (components.get("schemas") or {}).items():
            result.schemas[name] = self.parse_schema_ref(schema, f"#/components/schemas/{name}")

        for name, parameter in (components.get("parameters") or {}).items():
            # Referenced parameters are generated where they are defined
            if "$ref" in parameter:
                logger.debug("skipping referenced parameter %s -> %s", name, parameter["$ref"])
                continue
            result.parameters[name] = self.parse_parameter(parameter, f"#/components/parameters/{name}")

        return result

    def parse_schema_ref(self, schema: dict[str, Any] | None, path: str = "#") -> SchemaRef | None:
        """
        Parse a schema slot, which may be a $ref or an inline schema.

        Args:
            schema: The schema dictionary (None when absent)
            path: Current path in the document (for diagnostics)

        Returns:
            SchemaRef, or None when the slot is absent
        """
        if schema is None:
            return None

        if "$ref" in schema:
            siblings = {key: value for key, value in schema.items() if key != "$ref"}
            value = self._parse_schema(siblings, path) if siblings else None
            return SchemaRef(ref=schema["$ref"], value=value)

        return SchemaRef(value=self._parse_schema(schema, path))

    def parse_parameter(self, parameter: dict[str, Any], path: str = "#") -> Parameter:
        """Parse a parameter object (schema or content based)."""
        content = None
        if "content" in parameter:
            content = {
                media_type: MediaType(schema=self.parse_schema_ref(media.get("schema"), f"{path}/content/{media_type}/schema"))
                for media_type, media in parameter["content"].items()
            }

        return Parameter(
            name=parameter.get("name", ""),
            location=parameter.get("in", ""),
            description=parameter.get("description", ""),
            required=parameter.get("required", False),
            schema=self.parse_schema_ref(parameter.get("schema"), f"{path}/schema"),
            content=content,
            extensions=self._extract_extensions(parameter),
        )

    def _parse_schema(self, schema: dict[str, Any], path: str) -> Schema:
        """Parse an inline schema object."""
        schema_type, nullable = self._parse_type(schema.get("type"))

        node = Schema(
            type=schema_type,
            format=schema.get("format", ""),
            description=schema.get("description", ""),
            required=list(schema.get("required", [])),
            enum=list(schema.get("enum", [])),
            nullable=schema.get("nullable", False) or nullable,
            read_only=schema.get("readOnly", False),
            write_only=schema.get("writeOnly", False),
            extensions=self._extract_extensions(schema),
            source_path=path,
        )

        for name, prop_schema in schema.get("properties", {}).items():
            node.properties[name] = self.parse_schema_ref(prop_schema, f"{path}/properties/{name}")

        if "items" in schema:
            node.items = self.parse_schema_ref(schema["items"], f"{path}/items")

        for key, attr in (("allOf", "all_of"), ("anyOf", "any_of"), ("oneOf", "one_of")):
            members = [self.parse_schema_ref(member, f"{path}/{key}/{i}") for i, member in enumerate(schema.get(key, []))]
            setattr(node, attr, members)

        additional = schema.get("additionalProperties")
        if isinstance(additional, bool):
            node.additional_properties_allowed = additional
        elif isinstance(additional, dict):
            node.additional_properties = self.parse_schema_ref(additional, f"{path}/additionalProperties")

        return node

    def _parse_type(self, type_value: Any) -> tuple[str, bool]:
        """Parse ``type``, accepting the ["T", "null"] list form."""
        if type_value is None:
            return "", False
        if isinstance(type_value, list):
            types = [t for t in type_value if t != "null"]
            nullable = len(types) != len(type_value)
            return (types[0] if types else ""), nullable
        return type_value, False

    def _extract_extensions(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Extract x-* extensions from a schema object."""
        return {key: value for key, value in schema.items() if key.startswith("x-")}
