"""
Type model node definitions.

These nodes represent compiled schemas, ready to be rendered as Go
declarations. All references are resolved to type names and every nested
anonymous type that needs a name has been promoted.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...utils import DEFAULT_NAMING, NamingTransform
from ..errors import InvalidExtensionError, PropertyConflictError
from .extensions import EXT_GO_FIELD_NAME, ext_go_field_name

logger = logging.getLogger(__name__)

# Fully dynamic Go types
DYNAMIC_TYPE = "interface{}"
DYNAMIC_MAP_TYPE = "map[string]interface{}"


class SchemaKind(Enum):
    """Kind of a compiled schema. Determines which fields are populated."""

    PRIMITIVE = "primitive"  # go_type is a scalar
    ARRAY = "array"  # array_type is set, go_type is "[]" + element type
    OBJECT = "object"  # properties are set, go_type is a struct expression
    REFERENCE = "reference"  # ref_type names another type
    DYNAMIC = "dynamic"  # interface{} or map[string]interface{}


@dataclass
class EmbeddedRef:
    """A referenced type embedded in a merged (allOf) struct."""

    ref: str = ""
    type_name: str = ""


@dataclass
class GoSchema:
    """A compiled schema."""

    kind: SchemaKind = SchemaKind.DYNAMIC

    # The Go type expression, when not a reference
    go_type: str = ""

    # The referenced type name (set iff kind is REFERENCE)
    ref_type: str = ""

    # Scalar type of the schema carried next to a $ref, when resolvable
    ref_go_type: str = ""

    # Element schema (set iff kind is ARRAY)
    array_type: GoSchema | None = None

    # Constant name -> literal value
    enum_values: dict[str, str] = field(default_factory=dict)

    properties: list[Property] = field(default_factory=list)
    has_additional_properties: bool = False
    additional_properties_type: GoSchema | None = None

    # Promoted helper types to emit alongside this schema
    additional_types: list[TypeDefinition] = field(default_factory=list)

    # Types embedded by allOf composition
    embedded_refs: list[EmbeddedRef] = field(default_factory=list)

    # Some types never need a pointer when optional
    skip_optional_pointer: bool = False

    description: str = ""

    def __post_init__(self) -> None:
        if self.kind is SchemaKind.REFERENCE and not self.ref_type:
            raise ValueError("reference schema requires ref_type")
        if self.kind is not SchemaKind.REFERENCE and self.ref_type:
            raise ValueError(f"{self.kind.value} schema cannot have ref_type")
        if self.kind is SchemaKind.ARRAY and self.array_type is None:
            raise ValueError("array schema requires array_type")

    @classmethod
    def dynamic(cls, go_type: str = DYNAMIC_TYPE, description: str = "") -> GoSchema:
        return cls(kind=SchemaKind.DYNAMIC, go_type=go_type, description=description)

    def is_ref(self) -> bool:
        return self.kind is SchemaKind.REFERENCE

    def type_decl(self) -> str:
        """The type expression used wherever this schema is referenced."""
        if self.is_ref():
            return self.ref_type
        return self.go_type

    def add_property(self, prop: Property) -> None:
        """
        Add a property, tolerating an equivalent duplicate.

        Raises:
            PropertyConflictError: A property with the same name but a
                different definition already exists
        """
        for existing in self.properties:
            if existing.json_field_name != prop.json_field_name:
                continue
            if not existing.is_equivalent(prop):
                raise PropertyConflictError(prop.json_field_name)
            return
        self.properties.append(prop)

    def get_additional_type_defs(self) -> list[TypeDefinition]:
        """
        All promoted types reachable from this schema, properties first.

        Fields carried by a reference node are not part of the declaration it
        renders as; their types only become reachable once an allOf merges
        them into a struct.
        """
        result = []
        if not self.is_ref():
            for prop in self.properties:
                result.extend(prop.schema.get_additional_type_defs())
        result.extend(self.additional_types)
        return result


@dataclass
class Property:
    """A field of an object schema."""

    json_field_name: str = ""
    schema: GoSchema = field(default_factory=GoSchema)
    required: bool = False
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False
    description: str = ""

    # x-* extensions consumed by the renderer
    extensions: dict[str, Any] = field(default_factory=dict)

    def is_equivalent(self, other: Property) -> bool:
        return (
            self.json_field_name == other.json_field_name
            and self.required == other.required
            and self.schema.type_decl() == other.schema.type_decl()
        )

    def go_field_name(self, naming: NamingTransform | None = None) -> str:
        if EXT_GO_FIELD_NAME in self.extensions:
            try:
                return ext_go_field_name(self.extensions[EXT_GO_FIELD_NAME])
            except InvalidExtensionError as err:
                logger.debug("ignoring %s on '%s': %s", EXT_GO_FIELD_NAME, self.json_field_name, err)
        return (naming or DEFAULT_NAMING).schema_name_to_type_name(self.json_field_name)

    def go_type_def(self) -> str:
        """The field type, pointer-wrapped when the value may be absent."""
        type_def = self.schema.type_decl()
        if not self.schema.skip_optional_pointer and (not self.required or self.nullable or self.read_only or self.write_only):
            type_def = "*" + type_def
        return type_def


@dataclass
class TypeDefinition:
    """A named Go type declaration.

    For ``components/schemas/Person`` the type name is ``Person`` and the
    json name is ``Person``; for a promoted nested type the json name is the
    dotted property path.
    """

    type_name: str = ""
    json_name: str = ""
    schema: GoSchema = field(default_factory=GoSchema)

    def can_alias(self) -> bool:
        """Whether this definition can be a type alias rather than a new type."""
        if self.schema.is_ref():
            return True
        array_type = self.schema.array_type
        return array_type is not None and array_type.is_ref()


@dataclass
class EnumDefinition:
    """A named set of constants for an enum type."""

    type_name: str = ""
    schema: GoSchema = field(default_factory=GoSchema)

    # Quote character around literals ('"' for string enums)
    value_wrapper: str = ""

    def constants(self) -> list[tuple[str, str]]:
        """(constant name, Go literal) pairs in declaration order."""
        result = []
        for name, value in self.schema.enum_values.items():
            literal = json.dumps(value, ensure_ascii=False) if self.value_wrapper else value
            result.append((name, literal))
        return result


@dataclass
class TypeModel:
    """The complete compiled type model of a document."""

    package_name: str = ""

    # Type definitions, each followed by its promoted helper types
    types: list[TypeDefinition] = field(default_factory=list)

    enums: list[EnumDefinition] = field(default_factory=list)
