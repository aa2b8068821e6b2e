"""
Model descriptors: the render input of one generated model.

ModelDescriptorBuilder runs the walker, the union resolver and the type
projector over one model definition and assembles everything the
templates need, so templates never inspect schema semantics.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from ..utils import change_format, identity, js_string, object_to_template_value, schema_name, snake_case, upper_case
from .spec_source import (
    ATTRIBUTE_ALIAS_KEY,
    ENUM_KEY_ATTRIBUTES_KEY,
    PARENT_PREFIX,
    apply_required,
    get_id_attribute,
    get_model_name,
)
from .type_projector import ProjectedType, TypeProjector, get_enum_type, get_flow_type, get_prop_type
from .union_resolver import UnionDescriptor
from .walker import walk

logger = logging.getLogger(__name__)


@dataclass
class EnumConstant:
    """A synthesized enum constant."""

    name: str = ""  # e.g. STATUS_ACTIVE
    value: Any = None
    literal: str = ""  # JavaScript literal of the value


@dataclass
class ImportEntry:
    """A model imported by the generated model."""

    name: str = ""
    schema_name: str = ""
    file_path: str = ""


@dataclass
class OneOfEntry:
    """Render form of a discriminated union."""

    key: str = ""
    property_name: str = ""  # Accessor expression of the discriminator
    mapping: str = ""  # Object literal: discriminator value -> schema name


@dataclass
class PropertyDescriptor:
    """Render form of one model property."""

    name: str = ""  # After the attribute-naming transform
    property_name: str = ""  # As declared in the schema
    alias: str | None = None
    required: bool = False
    type: Any = None
    default: Any = None
    default_value: str = "undefined"
    is_enum: bool = False
    is_value_string: bool = False
    enum: list[Any] | None = None
    enum_objects: list[EnumConstant] | None = None
    enum_type: Any = None
    items: Any = None
    prop_type: str = ""
    flow_type: str = ""
    projected: ProjectedType | None = None


@dataclass
class ModelDescriptor:
    """Everything needed to render one model."""

    name: str = ""
    file_name: str = ""
    id_attribute: str = ""
    props: list[PropertyDescriptor] = field(default_factory=list)
    schema: str | None = None  # Serialized dependency schema tree
    dependency: Any = None
    one_ofs: list[OneOfEntry] = field(default_factory=list)
    unions: list[UnionDescriptor] = field(default_factory=list)
    import_list: list[ImportEntry] = field(default_factory=list)
    use_prop_types: bool = True
    use_flow: bool = False

    @property
    def enum_names(self) -> list[str]:
        """Names of every enum constant of the model, in property order."""
        return [obj.name for prop in self.props for obj in prop.enum_objects or []]

    def to_dict(self) -> dict[str, Any]:
        """Plain data form of the descriptor.

        Raw schema nodes (property items, union branch schemas) can be
        cyclic and are left out.
        """
        data = asdict(
            replace(
                self,
                props=[replace(prop, items=None) for prop in self.props],
                unions=[replace(union, branches=[replace(branch, schema={}) for branch in union.branches]) for union in self.unions],
            )
        )
        data["enum_names"] = self.enum_names
        return data


def enum_constant_name(enum_name: Any, property_name: str) -> str:
    """Constant name of an enum value ("status", "active" -> "STATUS_ACTIVE")."""
    converted_name = "_".join(upper_case(property_name).split(" "))
    converted_key = "_".join(upper_case(enum_name).split(" "))
    return f"{converted_name}_{converted_key}"


def _js_literal(value: Any) -> str:
    if isinstance(value, str):
        return js_string(value)
    return json.dumps(value)


class ModelDescriptorBuilder:
    """Builds the ModelDescriptor of a model definition."""

    def __init__(
        self,
        attribute_converter: Callable[[str], str] = identity,
        use_prop_types: bool = True,
        use_flow: bool = False,
    ):
        self.attribute_converter = attribute_converter
        self.use_prop_types = use_prop_types
        self.use_flow = use_flow
        self.projector = TypeProjector(attribute_converter)

    def build(self, name: str, model: dict[str, Any]) -> ModelDescriptor | None:
        """
        Build the descriptor of a model.

        Args:
            name: Model name
            model: Model definition schema

        Returns:
            The descriptor, or None when the model has no resolvable identity
            attribute (a warning is logged)

        Raises:
            UnionResolutionError: If a discriminated union cannot be resolved
        """
        id_attribute = get_id_attribute(model, name)
        if not id_attribute:
            return None

        properties = apply_required(model["properties"], model.get("required"))
        result = walk(properties)
        dependency = result.dependency or {}
        unions = {union.key: union for union in result.unions}
        logger.debug(f"{name}: {len(result.models)} model references, {len(result.unions)} unions")

        return ModelDescriptor(
            name=name,
            file_name=snake_case(name),
            id_attribute=self.prepare_id_attribute(id_attribute),
            props=[self._property(key, prop, dependency.get(key), unions) for key, prop in properties.items()],
            schema=object_to_template_value(change_format(result.dependency, self.attribute_converter)),
            dependency=result.dependency,
            one_ofs=[
                OneOfEntry(
                    key=union.key,
                    property_name=self.prepare_id_attribute(union.property_name),
                    mapping=object_to_template_value(union.mapping),
                )
                for union in result.unions
            ],
            unions=result.unions,
            import_list=self._import_list(result.models, name),
            use_prop_types=self.use_prop_types,
            use_flow=self.use_flow,
        )

    def prepare_id_attribute(self, id_attribute: str) -> str:
        """Accessor expression of an identity (or discriminator) attribute.

        Examples:
            "id" -> "'id'"
            "meta.id" -> "(value) => value['meta']['id']"
            "parent.ownerId" -> "(value, parent) => parent['ownerId']"
        """
        splits = id_attribute.split(".")
        path = "".join(f"['{self.attribute_converter(part)}']" for part in splits[1:])
        if splits[0] == PARENT_PREFIX and len(splits) > 1:
            return f"(value, parent) => parent{path}"
        if len(splits) == 1:
            return f"'{self.attribute_converter(splits[0])}'"
        return f"(value) => value['{self.attribute_converter(splits[0])}']{path}"

    def enum_objects(self, name: str, enums: list[Any] | None, key_attributes: list[Any] | None = None) -> list[EnumConstant] | None:
        """Enum constants of a property, keyed by value or by positional override."""
        if not enums:
            return None
        key_attributes = key_attributes or []
        objects = []
        for index, value in enumerate(enums):
            enum_name = key_attributes[index] if index < len(key_attributes) and key_attributes[index] else value
            objects.append(EnumConstant(name=enum_constant_name(enum_name, name), value=value, literal=_js_literal(value)))
        return objects

    @staticmethod
    def render_default(prop: PropertyDescriptor) -> str:
        """JavaScript expression of a property's default value."""
        if prop.default is None:
            return "undefined"
        for enum_object in prop.enum_objects or []:
            if enum_object.value == prop.default:
                return enum_object.name
        if prop.is_value_string:
            return js_string(prop.default)
        return json.dumps(prop.default)

    def _property(
        self,
        key: str,
        prop: Any,
        dependency: Any,
        unions: dict[str, UnionDescriptor],
    ) -> PropertyDescriptor:
        prop = prop if isinstance(prop, dict) else {}
        name = self.attribute_converter(key)
        projected = self.projector.project(prop, dependency, unions)
        enum_objects = self.enum_objects(name, prop.get("enum"), prop.get(ENUM_KEY_ATTRIBUTES_KEY))
        descriptor = PropertyDescriptor(
            name=name,
            property_name=key,
            alias=prop.get(ATTRIBUTE_ALIAS_KEY),
            required=prop.get("required") is True,
            type=prop.get("type"),
            default=prop.get("default"),
            is_enum=bool(prop.get("enum")),
            is_value_string=prop.get("type") == "string",
            enum=prop.get("enum"),
            enum_objects=enum_objects,
            enum_type=get_enum_type(prop.get("type")),
            items=prop.get("items"),
            prop_type=get_prop_type(prop.get("type"), prop.get("enum"), enum_objects, projected),
            flow_type=get_flow_type(prop.get("type"), prop.get("enum"), projected),
            projected=projected,
        )
        descriptor.default_value = self.render_default(descriptor)
        return descriptor

    @staticmethod
    def _import_list(models: list[dict[str, Any]], own_name: str) -> list[ImportEntry]:
        imports: dict[str, ImportEntry] = {}
        for model in models:
            model_name = get_model_name(model)
            # A self reference uses the schema defined in the same file
            if model_name != own_name and model_name not in imports:
                imports[model_name] = ImportEntry(
                    name=model_name,
                    schema_name=schema_name(model_name),
                    file_path=snake_case(model_name),
                )
        return list(imports.values())
