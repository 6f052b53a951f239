"""
Reference resolver for $ref paths.

Converts a $ref path into the nominal Go type it names. Referenced schemas
are never inlined, so cyclic documents resolve in bounded depth.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..errors import MalformedReferenceError, UnmappedExternalDocumentError
from .name_resolver import NameResolver

# Accepted segment counts for "#/..." fragments
LOCAL_REF_DEPTHS = (4,)
REMOTE_REF_DEPTHS = (2, 4)


def is_whole_document_reference(ref: str) -> bool:
    """
    Check whether a $ref points at a whole document.

    "#/components/schemas/Foo" -> False
    "./file.yml#/components/schemas/Bar" -> False
    "./file.yml" -> True
    """
    return bool(ref) and "#" not in ref


def is_go_type_reference(ref: str) -> bool:
    """Check whether a $ref can be converted into a Go type name."""
    return bool(ref) and not is_whole_document_reference(ref)


class ReferenceResolver:
    """Resolves $ref paths to Go type names."""

    def __init__(
        self,
        import_mapping: Mapping[str, str] | None = None,
        name_resolver: NameResolver | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            import_mapping: External document identifier -> Go package alias
            name_resolver: Converts the final path segment into a type name
        """
        self.import_mapping = MappingProxyType(dict(import_mapping or {}))
        self.name_resolver = name_resolver or NameResolver()

    def resolve(self, ref_path: str) -> str:
        """
        Resolve a $ref path to a Go type name.

        "#/components/schemas/Foo" -> "Foo"
        "doc.json#/components/schemas/Foo" -> "<alias>.Foo"
        "doc.json#/Foo" -> "<alias>.Foo"

        Raises:
            MalformedReferenceError: Unsupported depth or shape
            UnmappedExternalDocumentError: External document missing from the import mapping
        """
        return self._resolve(ref_path, local=True)

    def _resolve(self, ref_path: str, local: bool) -> str:
        if not ref_path:
            raise MalformedReferenceError(ref_path, "empty reference")

        if ref_path.startswith("#"):
            return self._resolve_fragment(ref_path, local)

        parts = ref_path.split("#")
        if len(parts) != 2:
            raise MalformedReferenceError(ref_path, "unsupported reference")

        document, fragment = parts
        alias = self.import_mapping.get(document)
        if alias is None:
            raise UnmappedExternalDocumentError(document, ref_path)

        type_name = self._resolve_fragment("#" + fragment, local=False)
        return f"{alias}.{type_name}"

    def _resolve_fragment(self, ref_path: str, local: bool) -> str:
        parts = ref_path.split("/")
        depth = len(parts)
        allowed = LOCAL_REF_DEPTHS if local else REMOTE_REF_DEPTHS
        if depth not in allowed:
            raise MalformedReferenceError(ref_path, f"unexpected reference depth {depth}")

        type_name = self.name_resolver.type_name(parts[-1])
        if not type_name:
            raise MalformedReferenceError(ref_path, "empty type name")
        return type_name
