"""
Input node definitions for OpenAPI documents.

These nodes represent already-decoded schema objects before any reference
resolution or Go-specific processing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Schema:
    """A single OpenAPI schema object."""

    type: str = ""
    format: str = ""
    description: str = ""

    properties: dict[str, SchemaRef] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    items: SchemaRef | None = None
    enum: list[Any] = field(default_factory=list)

    all_of: list[SchemaRef] = field(default_factory=list)
    any_of: list[SchemaRef] = field(default_factory=list)
    one_of: list[SchemaRef] = field(default_factory=list)

    # additionalProperties as a schema, or as a plain true/false
    additional_properties: SchemaRef | None = None
    additional_properties_allowed: bool | None = None

    nullable: bool = False
    read_only: bool = False
    write_only: bool = False

    # x-* extensions
    extensions: dict[str, Any] = field(default_factory=dict)

    # Location in the source document (for diagnostics)
    source_path: str = ""

    def has_additional_properties(self) -> bool:
        """Whether extra fields should be modelled.

        Unlike plain JSON Schema, an absent additionalProperties means no:
        extra fields are only modelled when explicitly enabled or typed.
        """
        if self.additional_properties_allowed:
            return True
        return self.additional_properties is not None


@dataclass
class SchemaRef:
    """A schema slot: either a $ref or an inline schema.

    For a reference, ``value`` holds the fields written next to the $ref
    (if any), never the body of the referenced schema.
    """

    ref: str = ""
    value: Schema | None = None


@dataclass
class MediaType:
    """One entry of a parameter's content map."""

    schema: SchemaRef | None = None


@dataclass
class Parameter:
    """A parameter-like node that has either a schema or content."""

    name: str = ""
    location: str = ""
    description: str = ""
    required: bool = False
    schema: SchemaRef | None = None
    content: dict[str, MediaType] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass
class Document:
    """The components of an OpenAPI document relevant to type generation."""

    schemas: dict[str, SchemaRef] = field(default_factory=dict)
    parameters: dict[str, Parameter] = field(default_factory=dict)
