"""
Configuration for the model generator pipeline.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..utils import ATTRIBUTE_CONVERTERS


@dataclass
class GeneratorConfig:
    """Configuration options for model generation."""

    # Read model definitions from a Swagger 2 style document
    is_v2: bool = False

    # Emit Flow type annotations
    use_flow: bool = False

    # Emit PropTypes declarations
    use_prop_types: bool = True

    # Naming transform applied to attribute keys ("none", "camel", "snake")
    attribute_case: str = "none"

    # Directory with user templates taking precedence over the packaged ones
    template_dir: str = ""

    # Pass the generation timestamp to templates
    with_date: bool = False

    # Extension of generated files
    file_extension: str = ".js"

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        if config.attribute_case not in ATTRIBUTE_CONVERTERS:
            raise ValueError(f"Unknown attribute_case {config.attribute_case!r}, expected one of {sorted(ATTRIBUTE_CONVERTERS)}")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "is_v2": self.is_v2,
            "use_flow": self.use_flow,
            "use_prop_types": self.use_prop_types,
            "attribute_case": self.attribute_case,
            "template_dir": self.template_dir,
            "with_date": self.with_date,
            "file_extension": self.file_extension,
        }

    @property
    def attribute_converter(self) -> Callable[[str], str]:
        """The naming transform selected by `attribute_case`."""
        return ATTRIBUTE_CONVERTERS[self.attribute_case]
