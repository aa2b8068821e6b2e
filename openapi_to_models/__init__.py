"""OpenAPI to Models

Generate normalizr entity schemas and Immutable record models, annotated
with PropTypes and/or Flow types, from the model definitions of an
OpenAPI (or Swagger 2) document.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    GeneratorConfig,
    ModelDescriptorBuilder,
    ModelGenerationError,
    ModelGenerator,
    SpecFormatError,
    UnionResolutionError,
    load_spec,
)

__all__ = [
    "ModelGenerator",
    "GeneratorConfig",
    "ModelDescriptorBuilder",
    "ModelGenerationError",
    "SpecFormatError",
    "UnionResolutionError",
    "AtomicWriter",
    "load_spec",
]
