"""
Schema merger for allOf composition.

Combines the members of an allOf list into a single object schema whose
fields are the union of the members' fields.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..errors import PropertyConflictError
from ..schema_ast.nodes import SchemaRef
from .ir_nodes import EmbeddedRef, GoSchema, SchemaKind
from .reference_resolver import is_go_type_reference

if TYPE_CHECKING:
    from .analyzer import SchemaCompiler

logger = logging.getLogger(__name__)


class SchemaMerger:
    """Merges allOf members into one object schema."""

    def __init__(self, compiler: SchemaCompiler):
        """
        Initialize the merger.

        Args:
            compiler: Compiles each member; the merger recurses through it
        """
        self.compiler = compiler

    def merge(self, all_of: Sequence[SchemaRef | None], path: Sequence[str]) -> GoSchema:
        """
        Merge allOf members.

        Referenced members are embedded by name; every member's fields are
        unioned. Fields with the same name must be equivalent. Additional
        properties are enabled if any member enables them; when members
        disagree on their type, the first one wins.

        Args:
            all_of: The allOf members
            path: Property path of the composed schema

        Returns:
            An OBJECT schema rendered as a struct

        Raises:
            PropertyConflictError: Two members define the same field differently
        """
        merged = GoSchema(kind=SchemaKind.OBJECT)

        for member in all_of:
            member_schema = self.compiler.compile(member, path)

            if member is not None and is_go_type_reference(member.ref):
                merged.embedded_refs.append(EmbeddedRef(ref=member.ref, type_name=member_schema.ref_type))

            for prop in member_schema.properties:
                try:
                    merged.add_property(prop)
                except PropertyConflictError as err:
                    err.path = tuple(path)
                    raise

            merged.enum_values.update(member_schema.enum_values)
            merged.additional_types.extend(member_schema.additional_types)
            self._merge_additional_properties(merged, member_schema, path)

        merged.go_type = self.compiler.struct_renderer.render_struct(merged)
        return merged

    def _merge_additional_properties(self, merged: GoSchema, member: GoSchema, path: Sequence[str]) -> None:
        if not member.has_additional_properties:
            return

        if not merged.has_additional_properties:
            merged.has_additional_properties = True
            merged.additional_properties_type = member.additional_properties_type
            return

        first = merged.additional_properties_type.type_decl() if merged.additional_properties_type else ""
        other = member.additional_properties_type.type_decl() if member.additional_properties_type else ""
        if first != other:
            logger.warning(
                "allOf members at '%s' declare different additionalProperties types (%s, %s); keeping %s",
                ".".join(path),
                first,
                other,
                first,
            )
