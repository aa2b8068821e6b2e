"""
Classification of schema nodes.

Each node is classified once into a SchemaKind; the walker and the type
projector dispatch on the kind instead of re-testing schema shapes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .spec_source import is_model


class SchemaKind(Enum):
    """Kind of a schema node."""

    MODEL = "model"  # Named model with an identity attribute
    DISCRIMINATED_UNION = "discriminated_union"  # oneOf + discriminator
    POLYMORPHIC_REF_LIST = "polymorphic_ref_list"  # oneOf without discriminator
    OBJECT_SHAPE = "object_shape"  # type: object
    ARRAY_SHAPE = "array_shape"  # type: array
    MAPPING = "mapping"  # Any other dict or list, walked generically
    PRIMITIVE_OR_OPAQUE = "primitive_or_opaque"  # Scalars


def classify(node: Any) -> SchemaKind:
    """Classify a schema node."""
    if not isinstance(node, (dict, list)):
        return SchemaKind.PRIMITIVE_OR_OPAQUE
    if isinstance(node, list):
        return SchemaKind.MAPPING
    if is_model(node):
        return SchemaKind.MODEL
    if isinstance(node.get("oneOf"), list):
        if node.get("discriminator"):
            return SchemaKind.DISCRIMINATED_UNION
        return SchemaKind.POLYMORPHIC_REF_LIST
    schema_type = node.get("type")
    if schema_type == "object":
        return SchemaKind.OBJECT_SHAPE
    if schema_type == "array":
        return SchemaKind.ARRAY_SHAPE
    return SchemaKind.MAPPING
