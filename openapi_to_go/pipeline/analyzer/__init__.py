"""
Analyzer module.

Contains reference resolution, name resolution, schema merging and the
compiler that builds the Go type model.
"""

from __future__ import annotations

from .analyzer import SchemaCompiler
from .ir_nodes import (
    EmbeddedRef,
    EnumDefinition,
    GoSchema,
    Property,
    SchemaKind,
    TypeDefinition,
    TypeModel,
)
from .name_resolver import IdentifierSanitizer, NameResolver, sanitize_enum_names
from .reference_resolver import ReferenceResolver
from .schema_merger import SchemaMerger

__all__ = [
    "GoSchema",
    "SchemaKind",
    "Property",
    "EmbeddedRef",
    "TypeDefinition",
    "EnumDefinition",
    "TypeModel",
    "IdentifierSanitizer",
    "NameResolver",
    "ReferenceResolver",
    "SchemaMerger",
    "SchemaCompiler",
    "sanitize_enum_names",
]
