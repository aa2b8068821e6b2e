"""
Load a spec document and prepare it for model generation.

Preparation stamps every schema definition with its model name and
replaces local `$ref` nodes by their targets, keeping the raw pointer
under ALTERNATIVE_REF_KEY so unions can still match mapping entries.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from .errors import SpecFormatError
from .spec_source import ALTERNATIVE_REF_KEY, MODEL_DEF_KEY, get_definitions_root

logger = logging.getLogger(__name__)


def load_spec(path: str | Path, is_v2: bool = False) -> dict[str, Any]:
    """Read a JSON spec document and prepare it."""
    with open(path, encoding="utf-8") as f:
        spec = json.load(f)
    logger.debug(f"Loaded spec {path}")
    return prepare_spec(spec, is_v2)


def resolve_ref(spec: dict[str, Any], ref: str) -> Any:
    """Resolve a local `#/...` JSON pointer in the spec."""
    if not ref.startswith("#"):
        raise SpecFormatError(f"Only local references are supported: {ref}")
    node: Any = spec
    for part in ref.lstrip("#/").split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        try:
            node = node[int(part)] if isinstance(node, list) else node[part]
        except (KeyError, IndexError, ValueError, TypeError) as e:
            raise SpecFormatError(f"Unresolvable reference {ref}") from e
    return node


def prepare_spec(spec: dict[str, Any], is_v2: bool = False) -> dict[str, Any]:
    """Return a copy of the spec with model markers and dereferenced `$ref`s."""
    spec = copy.deepcopy(spec)
    for name, schema in get_definitions_root(spec, is_v2).items():
        if isinstance(schema, dict):
            schema.setdefault(MODEL_DEF_KEY, name)
    _Dereferencer(spec).visit(spec)
    return spec


class _Dereferencer:
    """Replaces `$ref` nodes in place, visiting every container once."""

    def __init__(self, spec: dict[str, Any]):
        self.spec = spec
        self._visited: set[int] = set()
        self._resolved: dict[str, dict[str, Any]] = {}

    def visit(self, node: Any) -> None:
        if not isinstance(node, (dict, list)) or id(node) in self._visited:
            return
        self._visited.add(id(node))
        items = node.items() if isinstance(node, dict) else enumerate(node)
        for key, value in list(items):
            if isinstance(value, dict) and isinstance(value.get("$ref"), str):
                value = self._deref(value)
                node[key] = value
            self.visit(value)

    def _deref(self, ref_node: dict[str, Any]) -> dict[str, Any]:
        ref = ref_node["$ref"]
        if ref not in self._resolved:
            target = resolve_ref(self.spec, ref)
            if not isinstance(target, dict):
                raise SpecFormatError(f"Reference {ref} does not point at a schema")
            # Chained references resolve to the final target
            chain = {ref}
            while isinstance(target.get("$ref"), str):
                if target["$ref"] in chain:
                    raise SpecFormatError(f"Circular reference chain at {ref}")
                chain.add(target["$ref"])
                target = resolve_ref(self.spec, target["$ref"])
            self._resolved[ref] = target
        target = self._resolved[ref]
        siblings = {k: v for k, v in ref_node.items() if k != "$ref"}
        return {**target, **siblings, ALTERNATIVE_REF_KEY: ref}
