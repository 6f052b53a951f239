"""
Mapping of OpenAPI (type, format) pairs to Go scalar types.
"""

from __future__ import annotations

from ..errors import UnsupportedFormatError

# Returned for arrays: the caller must recurse into the item schema
ARRAY_SENTINEL = "array"

# Go type for opaque pre-serialized payloads
RAW_JSON_TYPE = "json.RawMessage"

INTEGER_FORMATS = {
    "int64": "int64",
    "int32": "int32",
    "int16": "int16",
    "int8": "int8",
    "int": "int",
    "uint64": "uint64",
    "uint32": "uint32",
    "uint16": "uint16",
    "uint8": "uint8",
    "uint": "uint",
    "": "int",
}

NUMBER_FORMATS = {
    "double": "float64",
    "float": "float32",
    "": "float32",
}

# Unlisted string formats are plain strings
STRING_FORMATS = {
    "byte": "[]byte",
    "email": "openapi_types.Email",
    "date": "openapi_types.Date",
    "date-time": "time.Time",
    "json": RAW_JSON_TYPE,
    "uuid": "openapi_types.UUID",
}


def resolve_go_type(schema_format: str, schema_type: str) -> str:
    """
    Resolve the Go type for a primitive schema.

    Args:
        schema_format: The schema ``format`` (empty when absent)
        schema_type: The schema ``type``

    Returns:
        The Go type, or ``ARRAY_SENTINEL`` for arrays

    Raises:
        UnsupportedFormatError: For unknown integer/number formats, any
            boolean format, or an unknown type
    """
    schema_format = schema_format or ""

    if schema_type == "array":
        return ARRAY_SENTINEL

    if schema_type == "integer":
        if schema_format in INTEGER_FORMATS:
            return INTEGER_FORMATS[schema_format]
        raise UnsupportedFormatError(schema_type, schema_format)

    if schema_type == "number":
        if schema_format in NUMBER_FORMATS:
            return NUMBER_FORMATS[schema_format]
        raise UnsupportedFormatError(schema_type, schema_format)

    if schema_type == "boolean":
        if schema_format:
            raise UnsupportedFormatError(schema_type, schema_format)
        return "bool"

    if schema_type == "string":
        return STRING_FORMATS.get(schema_format, "string")

    raise UnsupportedFormatError(schema_type, schema_format)
