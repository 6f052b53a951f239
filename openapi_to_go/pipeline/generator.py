"""
Pipeline generator: parse, compile and render a whole document.
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer.analyzer import SchemaCompiler
from .analyzer.ir_nodes import TypeModel
from .backends.go_backend import GoTypesRenderer
from .config import CodeGeneratorConfig
from .schema_ast.parser import SchemaParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates Go type declarations for the components of an OpenAPI document."""

    def __init__(self, document: dict[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            document: The decoded OpenAPI document
            config: Generator configuration
        """
        self.document = document
        self.config = config or CodeGeneratorConfig()
        self.parser = SchemaParser()
        self.compiler = SchemaCompiler(self.config)
        self.renderer = GoTypesRenderer(self.config)

    def build_type_model(self) -> TypeModel:
        """
        Compile the document into a type model.

        Raises:
            CompileError: The document cannot be fully resolved
        """
        parsed = self.parser.parse_document(self.document)

        types = self.compiler.compile_type_definitions(parsed.schemas)
        if self.config.include_parameters:
            types.extend(self.compiler.compile_parameter_definitions(parsed.parameters))

        enums = self.compiler.collect_enum_definitions(types) if self.config.generate_enums else []
        logger.debug("compiled %d types and %d enums", len(types), len(enums))

        return TypeModel(package_name=self.config.package_name, types=types, enums=enums)

    def generate(self) -> str:
        """Generate the Go source for the document."""
        from .. import __version__

        generation_comment = ""
        if self.config.add_generation_comment:
            generation_comment = f"Code generated by openapi_to_go version {__version__}. DO NOT EDIT."

        return self.renderer.render(self.build_type_model(), generation_comment)
