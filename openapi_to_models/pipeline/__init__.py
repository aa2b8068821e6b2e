"""
Pipeline - OpenAPI model definitions to normalizr/Immutable models.

1. Loader: stamp model names and dereference $ref
2. Walker: build each model's dependency schema tree
3. Union resolver: map discriminator values to schema names
4. Type projector: PropTypes and Flow expressions per property
5. Descriptor builder: render-ready model descriptor
6. Renderer and writer: Jinja2 templates to base, override and index files
"""

from __future__ import annotations

from .config import GeneratorConfig
from .descriptor import ModelDescriptor, ModelDescriptorBuilder, PropertyDescriptor
from .errors import ModelGenerationError, SpecFormatError, UnionResolutionError
from .generator import ModelGenerator
from .loader import load_spec, prepare_spec
from .renderer import TemplateRenderer
from .type_projector import ProjectedType, TypeProjector
from .union_resolver import UnionDescriptor, resolve_one_of
from .walker import WalkResult, walk
from .writer import AtomicWriter

__all__ = [
    "ModelGenerator",
    "GeneratorConfig",
    "ModelDescriptor",
    "ModelDescriptorBuilder",
    "PropertyDescriptor",
    "ModelGenerationError",
    "SpecFormatError",
    "UnionResolutionError",
    "load_spec",
    "prepare_spec",
    "TemplateRenderer",
    "ProjectedType",
    "TypeProjector",
    "UnionDescriptor",
    "resolve_one_of",
    "WalkResult",
    "walk",
    "AtomicWriter",
]
