"""
Deterministic ordering of mapping keys.

Every unordered collection that influences generated output goes through
these helpers, so repeated runs over the same document give identical output.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def key_sort_order(key: str) -> tuple[int, str]:
    """Sort key: "id" first, "*_at" keys last, plain keys in between.

    Within each group keys compare by code point, which matches byte order
    of their UTF-8 encoding.
    """
    if key.casefold() == "id":
        return (0, key)
    if key.endswith("_at"):
        return (2, key)
    return (1, key)


def sort_keys(keys: Iterable[str]) -> list[str]:
    """Return ``keys`` in canonical order (stable)."""
    return sorted(keys, key=key_sort_order)


def sorted_keys(mapping: Mapping[str, Any] | None) -> list[str]:
    """Return the keys of ``mapping`` in canonical order."""
    if not mapping:
        return []
    return sort_keys(mapping.keys())
