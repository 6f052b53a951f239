"""
Pipeline - OpenAPI schema to Go type generator.

This module provides a multi-phase architecture for generating Go type
declarations from OpenAPI component schemas:

1. Phase 1 (Parser): Parse the decoded document into input nodes
2. Phase 2 (Compiler): Resolve references and build the Go type model
3. Phase 3 (Backend): Render the type model as Go source
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .errors import (
    CompileError,
    InvalidExtensionError,
    MalformedReferenceError,
    MissingSchemaOrContentError,
    PropertyConflictError,
    UnmappedExternalDocumentError,
    UnsupportedFormatError,
)
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CompileError",
    "MalformedReferenceError",
    "UnmappedExternalDocumentError",
    "PropertyConflictError",
    "UnsupportedFormatError",
    "MissingSchemaOrContentError",
    "InvalidExtensionError",
]
