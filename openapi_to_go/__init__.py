"""OpenAPI to Go Type Generator

A Python package for generating Go type declarations from OpenAPI
component schemas, with reference resolution, allOf merging, enum
constants and deterministic naming.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGeneratorConfig,
    CompileError,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "CompileError",
]
