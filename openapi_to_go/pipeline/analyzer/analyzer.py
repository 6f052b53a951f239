"""
Schema compiler that builds the Go type model.

Phase 2 of the pipeline: compile input schema nodes into GoSchema nodes,
resolving references to type names, merging allOf compositions, extracting
enum constants and promoting nested anonymous types to named types.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from ...utils import COMMON_INITIALISMS, NamingTransform
from ..backends.go_backend import GoStructRenderer
from ..config import CodeGeneratorConfig
from ..errors import CompileError, MissingSchemaOrContentError, UnsupportedFormatError
from ..schema_ast.nodes import Parameter, Schema, SchemaRef
from .extensions import EXT_GO_TYPE, ext_type_name
from .ir_nodes import DYNAMIC_MAP_TYPE, DYNAMIC_TYPE, EnumDefinition, GoSchema, Property, SchemaKind, TypeDefinition
from .name_resolver import IdentifierSanitizer, NameResolver
from .ordering import sorted_keys
from .reference_resolver import ReferenceResolver, is_go_type_reference
from .schema_merger import SchemaMerger
from .type_mapper import ARRAY_SENTINEL, RAW_JSON_TYPE, resolve_go_type

logger = logging.getLogger(__name__)

# Content type whose schema is used for content-based parameters
JSON_CONTENT_TYPE = "application/json"


def format_enum_literal(value: Any) -> str:
    """
    Stringify an enum value the way it appears in the source document.

    Examples:
        True -> "true"
        None -> "null"
        2.0 -> "2"
        "red" -> "red"
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SchemaCompiler:
    """
    Compiles OpenAPI schemas into GoSchema nodes.

    A compiler only holds immutable configuration, so one instance can be
    reused for any number of documents.
    """

    def __init__(
        self,
        config: CodeGeneratorConfig | None = None,
        struct_renderer: GoStructRenderer | None = None,
    ):
        """
        Initialize the compiler.

        Args:
            config: Generator configuration (import mapping, initialisms)
            struct_renderer: Renders struct expressions for object schemas
        """
        self.config = config or CodeGeneratorConfig()
        self.naming = NamingTransform([*COMMON_INITIALISMS, *self.config.additional_initialisms])
        self.name_resolver = NameResolver(self.naming, IdentifierSanitizer())
        self.reference_resolver = ReferenceResolver(self.config.import_mapping, self.name_resolver)
        self.struct_renderer = struct_renderer or GoStructRenderer(self.naming)
        self.merger = SchemaMerger(self)

    def compile(self, sref: SchemaRef | None, path: Sequence[str] = ()) -> GoSchema:
        """
        Compile a schema slot.

        Args:
            sref: The schema slot (None when absent)
            path: Property names traversed to reach this schema

        Returns:
            The compiled schema

        Raises:
            CompileError: On any unresolvable reference, conflicting
                properties or unsupported format. The error's path is the
                deepest path at which it was detected.
        """
        path = list(path)
        try:
            return self._compile(sref, path)
        except CompileError as err:
            if not err.path:
                err.path = tuple(path)
            raise

    def _compile(self, sref: SchemaRef | None, path: list[str]) -> GoSchema:
        # Callers may omit schemas, e.g. array items
        if sref is None:
            return GoSchema.dynamic()

        schema = sref.value

        if is_go_type_reference(sref.ref):
            return self._compile_reference(sref, path)

        if sref.ref:
            logger.debug("compiling whole-document reference '%s' at '%s' inline", sref.ref, ".".join(path))

        if schema is None:
            return GoSchema.dynamic()

        # No way to model these as anything but a dynamic value
        if schema.any_of or schema.one_of:
            logger.debug("modelling anyOf/oneOf at %s as %s", schema.source_path or ".".join(path), DYNAMIC_TYPE)
            return GoSchema.dynamic(description=schema.description)

        if schema.all_of:
            merged = self.merger.merge(schema.all_of, path)
            merged.description = schema.description
            return merged

        if EXT_GO_TYPE in schema.extensions:
            return GoSchema(
                kind=SchemaKind.REFERENCE,
                ref_type=ext_type_name(schema.extensions[EXT_GO_TYPE]),
                description=schema.description,
            )

        if schema.type in ("", "object"):
            return self._compile_object(schema, path)

        out = self._resolve_type(schema, path)
        if schema.enum:
            out.enum_values = self._enum_constants(schema, path)
            if len(path) > 1:
                out = self._promote_enum(out, path)
        return out

    def _compile_reference(self, sref: SchemaRef, path: list[str]) -> GoSchema:
        """
        Compile a $ref slot into a reference to the named type.

        The referenced body is never inlined. Fields written next to the
        $ref (and their allOf members) contribute properties and enum
        constants to the reference node.
        """
        schema = sref.value
        out = GoSchema(
            kind=SchemaKind.REFERENCE,
            ref_type=self.reference_resolver.resolve(sref.ref),
            description=schema.description if schema else "",
        )
        if schema is None:
            return out

        if schema.type:
            try:
                ref_go_type = resolve_go_type(schema.format, schema.type)
            except UnsupportedFormatError as err:
                logger.debug("cannot resolve scalar type for reference '%s': %s", sref.ref, err)
            else:
                if ref_go_type != ARRAY_SENTINEL:
                    out.ref_go_type = ref_go_type

        for prop in self._generate_properties(schema, path):
            out.add_property(prop)
        out.enum_values.update(self._enum_constants(schema, path))

        for member in schema.all_of:
            member_schema = self.compile(member, path)
            for prop in member_schema.properties:
                out.add_property(prop)
            out.enum_values.update(member_schema.enum_values)

        return out

    def _compile_object(self, schema: Schema, path: list[str]) -> GoSchema:
        if not schema.properties and not schema.has_additional_properties():
            go_type = DYNAMIC_MAP_TYPE if schema.type == "object" else DYNAMIC_TYPE
            return GoSchema.dynamic(go_type, description=schema.description)

        out = GoSchema(
            kind=SchemaKind.OBJECT,
            properties=self._generate_properties(schema, path),
            has_additional_properties=schema.has_additional_properties(),
            description=schema.description,
        )
        if out.has_additional_properties:
            out.additional_properties_type = self.compile(schema.additional_properties, path)
            out.additional_types.extend(out.additional_properties_type.get_additional_type_defs())

        out.go_type = self.struct_renderer.render_struct(out)
        return out

    def _generate_properties(self, schema: Schema, path: list[str]) -> list[Property]:
        """Compile the declared properties of a schema, in canonical order."""
        properties = []
        for name in sorted_keys(schema.properties):
            prop_ref = schema.properties[name]
            prop_path = [*path, name]
            prop_schema = self.compile(prop_ref, prop_path)

            # Open-ended nested objects need a name to be referenced by
            if prop_schema.has_additional_properties and not prop_schema.is_ref():
                prop_schema = self._promote_object(prop_schema, prop_path)

            value = prop_ref.value if prop_ref is not None else None
            properties.append(
                Property(
                    json_field_name=name,
                    schema=prop_schema,
                    required=name in schema.required,
                    nullable=value.nullable if value else False,
                    read_only=value.read_only if value else False,
                    write_only=value.write_only if value else False,
                    description=value.description if value else "",
                    extensions=dict(value.extensions) if value else {},
                )
            )
        return properties

    def _promote_object(self, schema: GoSchema, path: list[str]) -> GoSchema:
        type_name = self.name_resolver.promoted_type_name(path)
        type_def = TypeDefinition(type_name=type_name, json_name=".".join(path), schema=schema)
        return self._as_reference(schema, type_name, type_def)

    def _promote_enum(self, schema: GoSchema, path: list[str]) -> GoSchema:
        type_name = self.naming.schema_name_to_type_name(self.naming.path_to_type_name(path))
        type_def = TypeDefinition(type_name=type_name, json_name=".".join(path), schema=schema)
        return self._as_reference(schema, type_name, type_def, ref_go_type=schema.go_type)

    @staticmethod
    def _as_reference(schema: GoSchema, type_name: str, type_def: TypeDefinition, ref_go_type: str = "") -> GoSchema:
        """A reference to a promoted type that keeps its helper types reachable."""
        return replace(
            schema,
            kind=SchemaKind.REFERENCE,
            go_type="",
            ref_type=type_name,
            ref_go_type=ref_go_type,
            array_type=None,
            enum_values={},
            properties=[],
            has_additional_properties=False,
            additional_properties_type=None,
            additional_types=[*schema.get_additional_type_defs(), type_def],
            embedded_refs=[],
        )

    def _enum_constants(self, schema: Schema, path: list[str]) -> dict[str, str]:
        """Constant name -> literal for the enum values of a schema."""
        if not schema.enum:
            return {}

        literals = [format_enum_literal(value) for value in schema.enum]
        constants = {}
        for identifier, literal in self.name_resolver.sanitize_enum_names(literals).items():
            name = self.naming.schema_name_to_enum_value_name(self.naming.path_to_type_name([*path, identifier]))
            constants[name] = literal
        return constants

    def _resolve_type(self, schema: Schema, path: list[str]) -> GoSchema:
        """Compile a primitive or array schema."""
        go_type = resolve_go_type(schema.format, schema.type)

        if go_type == ARRAY_SENTINEL:
            element = self.compile(schema.items, path)
            return GoSchema(
                kind=SchemaKind.ARRAY,
                go_type="[]" + element.type_decl(),
                array_type=element,
                properties=[] if element.is_ref() else list(element.properties),
                additional_types=list(element.additional_types),
                description=schema.description,
            )

        return GoSchema(
            kind=SchemaKind.PRIMITIVE,
            go_type=go_type,
            skip_optional_pointer=go_type == RAW_JSON_TYPE,
            description=schema.description,
        )

    def compile_parameter(self, parameter: Parameter, path: Sequence[str] = ()) -> GoSchema:
        """
        Compile the type of a parameter.

        A parameter with a schema uses it. Otherwise its content is used: the
        application/json schema when it is the only content type, a plain
        string for anything else.

        Raises:
            MissingSchemaOrContentError: Neither schema nor content
        """
        if parameter.schema is not None:
            return self.compile(parameter.schema, path)

        if not parameter.content:
            raise MissingSchemaOrContentError(parameter.name, path)

        media = parameter.content.get(JSON_CONTENT_TYPE)
        if len(parameter.content) > 1 or media is None:
            return GoSchema(kind=SchemaKind.PRIMITIVE, go_type="string", description=parameter.description)

        return self.compile(media.schema, path)

    def compile_type_definitions(self, schemas: Mapping[str, SchemaRef | None]) -> list[TypeDefinition]:
        """
        Compile named schemas into type definitions.

        Args:
            schemas: Schema name -> schema, e.g. components/schemas

        Returns:
            Type definitions in canonical name order, each followed by the
            helper types promoted while compiling it
        """
        types = []
        for name in sorted_keys(schemas):
            schema = self.compile(schemas[name], [name])
            types.append(TypeDefinition(type_name=self.name_resolver.type_name(name), json_name=name, schema=schema))
            types.extend(schema.get_additional_type_defs())
        return types

    def compile_parameter_definitions(self, parameters: Mapping[str, Parameter]) -> list[TypeDefinition]:
        """Compile named parameters into type definitions."""
        types = []
        for name in sorted_keys(parameters):
            parameter = parameters[name]
            schema = self.compile_parameter(parameter, [name])
            if not schema.description and parameter.description:
                schema = replace(schema, description=parameter.description)
            types.append(TypeDefinition(type_name=self.name_resolver.type_name(name), json_name=name, schema=schema))
            types.extend(schema.get_additional_type_defs())
        return types

    def collect_enum_definitions(self, type_definitions: Sequence[TypeDefinition]) -> list[EnumDefinition]:
        """Enum definitions for every type definition that carries enum constants."""
        enums = []
        for type_def in type_definitions:
            schema = type_def.schema
            if not schema.enum_values:
                continue
            scalar_type = schema.ref_go_type if schema.is_ref() else schema.go_type
            enums.append(
                EnumDefinition(
                    type_name=type_def.type_name,
                    schema=schema,
                    value_wrapper='"' if scalar_type == "string" else "",
                )
            )
        return enums
