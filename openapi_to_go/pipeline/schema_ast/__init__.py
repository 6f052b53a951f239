"""
Schema AST module.

Contains the input node definitions and the parser for OpenAPI documents.
"""

from __future__ import annotations

from .nodes import Document, MediaType, Parameter, Schema, SchemaRef
from .parser import SchemaParser

__all__ = [
    "Document",
    "MediaType",
    "Parameter",
    "Schema",
    "SchemaRef",
    "SchemaParser",
]
