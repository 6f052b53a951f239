"""
Go backend.

Renders struct type expressions for the compiler, and whole type
declaration files from a compiled TypeModel, using Jinja2 templates.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from ...utils import DEFAULT_NAMING, NamingTransform, string_to_go_comment
from ..analyzer.extensions import EXT_EXTRA_TAGS, EXT_OMIT_EMPTY, ext_extra_tags, ext_omit_empty
from ..analyzer.ir_nodes import DYNAMIC_TYPE, GoSchema, Property, SchemaKind, TypeDefinition, TypeModel
from ..analyzer.ordering import sort_keys
from ..config import CodeGeneratorConfig
from ..errors import InvalidExtensionError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "go"

# Qualified type prefix -> import spec needed when a declaration uses such a type
GO_IMPORTS = {
    "json.RawMessage": '"encoding/json"',
    "time.Time": '"time"',
    "openapi_types.": 'openapi_types "github.com/deepmap/oapi-codegen/pkg/types"',
}


def create_environment() -> jinja2.Environment:
    """Create the Jinja2 environment for the Go templates."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
    )
    return env


class GoStructRenderer:
    """Renders object schemas as Go struct type expressions."""

    def __init__(self, naming: NamingTransform | None = None, env: jinja2.Environment | None = None):
        self.naming = naming or DEFAULT_NAMING
        self.jinja_env = env or create_environment()
        self.struct_template = self.jinja_env.get_template("struct.go.jinja2")

    def render_struct(self, schema: GoSchema) -> str:
        """
        Render the struct expression for an object or merged schema.

        Args:
            schema: A schema carrying properties and/or embedded types

        Returns:
            The Go struct type expression
        """
        additional_properties_type = None
        if schema.has_additional_properties:
            additional_properties_type = DYNAMIC_TYPE
            if schema.additional_properties_type is not None:
                additional_properties_type = schema.additional_properties_type.type_decl()

        return self.struct_template.render(
            embedded_refs=schema.embedded_refs,
            fields=[self._prepare_field_context(prop) for prop in schema.properties],
            additional_properties_type=additional_properties_type,
        )

    def _prepare_field_context(self, prop: Property) -> dict[str, Any]:
        return {
            "comment": string_to_go_comment(prop.description),
            "name": prop.go_field_name(self.naming),
            "type_def": prop.go_type_def(),
            "tags": self.field_tags(prop),
        }

    def field_tags(self, prop: Property) -> str:
        """
        Build the struct tags for a property.

        The json tag gets ",omitempty" unless the field is required (and
        neither read-only nor write-only), nullable, or x-omitempty is false.
        Extra tags from x-oapi-codegen-extra-tags are added; tags are sorted.
        """
        omit_empty = True
        if EXT_OMIT_EMPTY in prop.extensions:
            try:
                omit_empty = ext_omit_empty(prop.extensions[EXT_OMIT_EMPTY])
            except InvalidExtensionError as err:
                logger.debug("ignoring %s on '%s': %s", EXT_OMIT_EMPTY, prop.json_field_name, err)

        tags = {}
        if (prop.required and not prop.read_only and not prop.write_only) or prop.nullable or not omit_empty:
            tags["json"] = prop.json_field_name
        else:
            tags["json"] = prop.json_field_name + ",omitempty"

        if EXT_EXTRA_TAGS in prop.extensions:
            try:
                tags.update(ext_extra_tags(prop.extensions[EXT_EXTRA_TAGS]))
            except InvalidExtensionError as err:
                logger.debug("ignoring %s on '%s': %s", EXT_EXTRA_TAGS, prop.json_field_name, err)

        return " ".join(f'{key}:"{tags[key]}"' for key in sort_keys(tags))


class GoTypesRenderer:
    """Renders a TypeModel as a Go source file of type declarations."""

    def __init__(self, config: CodeGeneratorConfig | None = None, env: jinja2.Environment | None = None):
        self.config = config or CodeGeneratorConfig()
        self.jinja_env = env or create_environment()
        self.types_template = self.jinja_env.get_template("types.go.jinja2")

    def render(self, model: TypeModel, generation_comment: str = "") -> str:
        """
        Render all type and enum declarations of a model.

        Args:
            model: The compiled type model
            generation_comment: Header comment (omitted when empty)

        Returns:
            Go source code
        """
        types = [self._prepare_type_context(type_def) for type_def in model.types]
        code = self.types_template.render(
            generation_comment=generation_comment,
            package_name=model.package_name or self.config.package_name,
            imports=self._collect_imports(model),
            enums=model.enums,
            types=types,
        )
        return code + "\n"

    def _prepare_type_context(self, type_def: TypeDefinition) -> dict[str, Any]:
        comment = string_to_go_comment(type_def.schema.description)
        if not comment:
            comment = f"// {type_def.type_name} defines model for {type_def.json_name}."
        return {
            "comment": comment,
            "type_name": type_def.type_name,
            "alias": type_def.can_alias(),
            "type_decl": type_def.schema.type_decl(),
        }

    def _collect_imports(self, model: TypeModel) -> list[str]:
        """Import specs for the qualified types used by any declaration."""
        type_exprs = set()
        for type_def in model.types:
            self._collect_type_exprs(type_def.schema, type_exprs)

        imports = []
        for prefix, import_spec in GO_IMPORTS.items():
            if any(expr.startswith(prefix) for expr in type_exprs):
                imports.append(import_spec)
        return sorted(imports)

    def _collect_type_exprs(self, schema: GoSchema, type_exprs: set[str]) -> None:
        """Add the scalar and named types a schema's declaration refers to."""
        if schema.is_ref():
            type_exprs.add(schema.ref_type)
            return
        if schema.kind is SchemaKind.ARRAY:
            self._collect_type_exprs(schema.array_type, type_exprs)
            return
        if schema.kind is not SchemaKind.OBJECT:
            type_exprs.add(schema.go_type)
            return

        for embedded in schema.embedded_refs:
            type_exprs.add(embedded.type_name)
        for prop in schema.properties:
            self._collect_type_exprs(prop.schema, type_exprs)
        if schema.additional_properties_type is not None:
            self._collect_type_exprs(schema.additional_properties_type, type_exprs)
