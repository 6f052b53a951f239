"""
Configuration for the Go type generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for type generation."""

    # Go package name of the generated file
    package_name: str = "api"

    # External document identifier -> Go package alias used to qualify
    # types referenced from that document (e.g. {"common.yaml": "common"})
    import_mapping: dict[str, str] = field(default_factory=dict)

    # Initialisms added to the built-in list (e.g. ["SKU", "VAT"])
    additional_initialisms: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Emit constants for enum types
    generate_enums: bool = True

    # Emit types for components/parameters
    include_parameters: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "import_mapping" and isinstance(v, dict):
                config.import_mapping = {str(doc): str(alias) for doc, alias in v.items()}
            elif k == "additional_initialisms":
                # "SKU, VAT" and "SKU VAT" both name two initialisms
                words = v.replace(",", " ").split() if isinstance(v, str) else v
                config.additional_initialisms = [str(word) for word in words]
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "import_mapping": dict(self.import_mapping),
            "additional_initialisms": list(self.additional_initialisms),
            "add_generation_comment": self.add_generation_comment,
            "generate_enums": self.generate_enums,
            "include_parameters": self.include_parameters,
        }
