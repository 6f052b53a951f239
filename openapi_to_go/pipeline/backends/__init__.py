"""
Code generation backends.

Contains the Go renderer for struct expressions and type declaration files.
"""

from __future__ import annotations

from .go_backend import GoStructRenderer, GoTypesRenderer

__all__ = [
    "GoStructRenderer",
    "GoTypesRenderer",
]
