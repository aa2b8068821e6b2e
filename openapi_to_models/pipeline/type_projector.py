"""
Projection of property schemas onto PropTypes and Flow type expressions.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..utils import compact_template_value, identity, js_string
from .spec_source import get_model_name, get_ref, parse_model_name
from .union_resolver import UnionDescriptor

SCHEMA_SUFFIX = "Schema"

PROP_TYPE_MAP: dict[str, str] = {
    "integer": "PropTypes.number",
    "number": "PropTypes.number",
    "string": "PropTypes.string",
    "boolean": "PropTypes.bool",
    "array": "PropTypes.array",
}

FLOW_TYPE_MAP: dict[str, str] = {
    "integer": "number",
    "number": "number",
    "string": "string",
    "boolean": "boolean",
}

ANY_PROP_TYPE = "PropTypes.any"
ANY_FLOW_TYPE = "any"


@dataclass
class ProjectedType:
    """Type expressions of a property in both annotation systems."""

    prop_type: str = ANY_PROP_TYPE
    flow: str = ANY_FLOW_TYPE


def _literal(value: Any, schema_type: str | None) -> str:
    if schema_type == "string" or isinstance(value, str):
        return js_string(value)
    return json.dumps(value)


def get_prop_type(
    schema_type: Any,
    enum: list[Any] | None = None,
    enum_objects: list[Any] | None = None,
    projected: ProjectedType | None = None,
) -> str:
    """PropTypes expression of a primitive, enum or projected type."""
    if enum_objects:
        return f"PropTypes.oneOf([{', '.join(obj.name for obj in enum_objects)}])"
    if enum:
        return f"PropTypes.oneOf([{', '.join(_literal(value, schema_type) for value in enum)}])"
    if projected is not None:
        return projected.prop_type
    return PROP_TYPE_MAP.get(schema_type, ANY_PROP_TYPE) if isinstance(schema_type, str) else ANY_PROP_TYPE


def get_flow_type(schema_type: Any, enum: list[Any] | None = None, projected: ProjectedType | None = None) -> str:
    """Flow type expression of a primitive, enum or projected type."""
    if enum:
        return " | ".join(_literal(value, schema_type) for value in enum)
    if projected is not None:
        return projected.flow
    return FLOW_TYPE_MAP.get(schema_type, ANY_FLOW_TYPE) if isinstance(schema_type, str) else ANY_FLOW_TYPE


def get_enum_type(schema_type: Any) -> Any:
    """Value type of an enum ("integer" and "number" are both "number")."""
    if schema_type in ("integer", "number"):
        return "number"
    return schema_type


def strip_schema_suffix(name: str) -> str:
    if name.endswith(SCHEMA_SUFFIX):
        return name[: -len(SCHEMA_SUFFIX)]
    return name


class TypeProjector:
    """Projects a property schema and its dependency leaf onto type expressions."""

    def __init__(self, attribute_converter: Callable[[str], str] = identity):
        self.attribute_converter = attribute_converter

    def project(
        self,
        prop: dict[str, Any],
        dependency: Any = None,
        unions: dict[str, UnionDescriptor] | None = None,
    ) -> ProjectedType | None:
        """
        Project a property onto PropTypes and Flow expressions.

        Args:
            prop: The property schema
            dependency: The property's leaf in the dependency schema tree
            unions: Unions of the model, by placeholder key

        Returns:
            ProjectedType, or None when no type can be projected
        """
        unions = unions or {}

        if isinstance(prop, dict) and isinstance(prop.get("oneOf"), list):
            candidates = self._candidates(prop["oneOf"])
            if candidates:
                return self._project_candidates(candidates)

        if dependency:
            return ProjectedType(
                prop_type=self._prop_type_from_dependency(dependency, unions),
                flow=self._flow_from_dependency(dependency, unions),
            )

        if not isinstance(prop, dict):
            return None

        # Arrays of models are covered by the dependency leaf above
        items = prop.get("items")
        if prop.get("type") == "array" and isinstance(items, dict) and items.get("type"):
            return ProjectedType(
                prop_type=f"ImmutablePropTypes.listOf({get_prop_type(items['type'], items.get('enum'))})",
                flow=f"{get_flow_type(items['type'], items.get('enum'))}[]",
            )

        properties = prop.get("properties")
        if prop.get("type") == "object" and isinstance(properties, dict) and properties:
            prop_types = {}
            flows = {}
            for key, value in properties.items():
                value = value if isinstance(value, dict) else {}
                name = self.attribute_converter(key)
                prop_types[name] = get_prop_type(value.get("type"), value.get("enum"))
                flows[name] = get_flow_type(value.get("type"), value.get("enum"))
            return ProjectedType(
                prop_type=f"ImmutablePropTypes.mapContains({compact_template_value(prop_types)})",
                flow=self._flow_object(flows),
            )

        return None

    def _candidates(self, branches: list[Any]) -> list[str]:
        names = []
        for branch in branches:
            if not isinstance(branch, dict):
                continue
            ref = get_ref(branch)
            name = parse_model_name(ref) if ref else get_model_name(branch)
            if name:
                names.append(name)
        return list(dict.fromkeys(names))

    def _project_candidates(self, names: list[str]) -> ProjectedType:
        return ProjectedType(
            prop_type=f"PropTypes.oneOfType([{', '.join(f'{name}PropType' for name in names)}])",
            flow=" | ".join(names) or ANY_FLOW_TYPE,
        )

    def _prop_type_from_dependency(self, dependency: Any, unions: dict[str, UnionDescriptor]) -> str:
        if isinstance(dependency, str):
            if dependency in unions:
                return self._project_candidates(unions[dependency].model_names).prop_type
            return f"{strip_schema_suffix(dependency)}PropType"
        if isinstance(dependency, list):
            return f"ImmutablePropTypes.listOf({self._prop_type_from_dependency(dependency[0], unions)})"
        shape = {self.attribute_converter(key): self._prop_type_from_dependency(value, unions) for key, value in dependency.items()}
        return f"ImmutablePropTypes.mapContains({compact_template_value(shape)})"

    def _flow_from_dependency(self, dependency: Any, unions: dict[str, UnionDescriptor]) -> str:
        if isinstance(dependency, str):
            if dependency in unions:
                return self._project_candidates(unions[dependency].model_names).flow
            return strip_schema_suffix(dependency)
        if isinstance(dependency, list):
            inner = self._flow_from_dependency(dependency[0], unions)
            return f"({inner})[]" if " | " in inner else f"{inner}[]"
        return self._flow_object({self.attribute_converter(key): self._flow_from_dependency(value, unions) for key, value in dependency.items()})

    @staticmethod
    def _flow_object(fields: dict[str, str]) -> str:
        return "{ " + ", ".join(f"{key}: {value}" for key, value in fields.items()) + " }"
