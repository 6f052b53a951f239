"""
Schema extension keys understood by the compiler and the Go renderer.
"""

from __future__ import annotations

from typing import Any

from ..errors import InvalidExtensionError

# Replaces the generated type with a caller-supplied Go type
EXT_GO_TYPE = "x-go-type"

# Overrides the Go field name of a property
EXT_GO_FIELD_NAME = "x-go-name"

# Controls ",omitempty" on the json tag of a property
EXT_OMIT_EMPTY = "x-omitempty"

# Additional struct tags for a property
EXT_EXTRA_TAGS = "x-oapi-codegen-extra-tags"


def ext_type_name(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidExtensionError(EXT_GO_TYPE, value)
    return value


def ext_go_field_name(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidExtensionError(EXT_GO_FIELD_NAME, value)
    return value


def ext_omit_empty(value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidExtensionError(EXT_OMIT_EMPTY, value)
    return value


def ext_extra_tags(value: Any) -> dict[str, str]:
    if not isinstance(value, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise InvalidExtensionError(EXT_EXTRA_TAGS, value)
    return dict(value)
