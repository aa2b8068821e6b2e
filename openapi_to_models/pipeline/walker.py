"""
Schema walker.

Builds the dependency schema tree of a model: a mirror of its property
tree whose leaves are model schema names or union placeholder keys.
Primitive leaves are pruned. Models are referenced by name and never
recursed into, so cyclic model graphs terminate. Cycles through schemas
without an identity attribute are cut where a node repeats on the path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..utils import schema_name
from .schema_ast import SchemaKind, classify
from .spec_source import get_model_name
from .union_resolver import UnionDescriptor, resolve_one_of

UNION_KEY_PREFIX = "oneOfSchema"


def union_key(index: int) -> str:
    """Placeholder key of the index-th union of a model (1-based)."""
    return f"{UNION_KEY_PREFIX}{index}"


@dataclass
class WalkResult:
    """Result of walking a schema node."""

    dependency: Any = None  # str leaf, [leaf], dict of leaves, or None
    models: list[dict[str, Any]] = field(default_factory=list)  # Referenced models, encounter order
    unions: list[UnionDescriptor] = field(default_factory=list)  # Unions, encounter order

    def merge(self, other: WalkResult) -> None:
        """Collect the models and unions discovered by a child walk."""
        self.models.extend(other.models)
        self.unions.extend(other.unions)


def walk(node: Any, union_offset: int = 0) -> WalkResult:
    """Walk a schema node.

    Args:
        node: The schema node
        union_offset: Number of unions already found in the current model;
            the next union found gets key `oneOfSchema{union_offset + 1}`

    Returns:
        WalkResult with the pruned dependency tree and discoveries
    """
    return _walk(node, union_offset, frozenset())


def _walk(node: Any, union_offset: int, path: frozenset[int]) -> WalkResult:
    # path holds the ids of the non-model containers above the node
    kind = classify(node)

    if kind is SchemaKind.PRIMITIVE_OR_OPAQUE:
        return WalkResult()

    if kind is SchemaKind.MODEL:
        return WalkResult(dependency=schema_name(get_model_name(node)), models=[node])

    if kind is SchemaKind.DISCRIMINATED_UNION:
        union = resolve_one_of(node)
        union.key = union_key(union_offset + 1)
        return WalkResult(
            dependency=union.key,
            models=[branch.schema for branch in union.branches],
            unions=[union],
        )

    # A self-referencing schema without identity has nothing to contribute
    if id(node) in path:
        return WalkResult()
    path = path | {id(node)}

    if kind is SchemaKind.OBJECT_SHAPE:
        return _walk(node.get("properties"), union_offset, path)

    if kind is SchemaKind.ARRAY_SHAPE:
        result = _walk(node.get("items"), union_offset, path)
        if result.dependency:
            result.dependency = [result.dependency]
        return result

    # MAPPING and POLYMORPHIC_REF_LIST: generic recursion over own keys
    return _walk_members(node, union_offset, path)


def _walk_members(node: dict[str, Any] | list[Any], union_offset: int, path: frozenset[int]) -> WalkResult:
    items = node.items() if isinstance(node, dict) else enumerate(node)
    result = WalkResult()
    dependency = {}
    for key, value in items:
        child = _walk(value, union_offset + len(result.unions), path)
        result.merge(child)
        if child.dependency:
            dependency[str(key)] = child.dependency
    result.dependency = dependency or None
    return result
