"""
Errors raised while compiling schemas into the Go type model.

Every error is terminal for the subtree being compiled and carries the
property path at which it was detected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class CompileError(Exception):
    """Base class for all compilation failures."""

    def __init__(self, message: str, path: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.path = tuple(path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {'.'.join(self.path)})"
        return self.message


class MalformedReferenceError(CompileError):
    """A reference path with an unsupported depth or shape."""

    def __init__(self, ref: str, reason: str, path: Sequence[str] = ()):
        super().__init__(f"invalid reference '{ref}': {reason}", path)
        self.ref = ref


class UnmappedExternalDocumentError(CompileError):
    """A reference into a document missing from the import mapping."""

    def __init__(self, document: str, ref: str, path: Sequence[str] = ()):
        super().__init__(
            f"unrecognized external reference '{document}' in '{ref}'; provide an import mapping for this document",
            path,
        )
        self.document = document
        self.ref = ref


class PropertyConflictError(CompileError):
    """Two properties with the same name but different definitions."""

    def __init__(self, field_name: str, path: Sequence[str] = ()):
        super().__init__(f"property '{field_name}' already exists with a different type", path)
        self.field_name = field_name


class UnsupportedFormatError(CompileError):
    """A type/format combination with no Go equivalent."""

    def __init__(self, schema_type: str, schema_format: str, path: Sequence[str] = ()):
        if schema_type in ("integer", "number", "boolean"):
            message = f"invalid {schema_type} format: '{schema_format}'"
        else:
            message = f"unhandled schema type: '{schema_type}'"
        super().__init__(message, path)
        self.schema_type = schema_type
        self.schema_format = schema_format


class MissingSchemaOrContentError(CompileError):
    """A parameter declaring neither a schema nor content."""

    def __init__(self, parameter_name: str, path: Sequence[str] = ()):
        super().__init__(f"parameter '{parameter_name}' has no schema or content", path)
        self.parameter_name = parameter_name


class InvalidExtensionError(CompileError):
    """An x-* extension whose value has the wrong shape."""

    def __init__(self, extension: str, value: Any, path: Sequence[str] = ()):
        super().__init__(f"invalid value for '{extension}': {value!r}", path)
        self.extension = extension
        self.value = value
