"""
Access to model definitions and model identity in a spec document.

Works on OpenAPI 3 documents (`components.schemas`) and Swagger 2 style
documents (`definitions`, or a raw mapping of schemas) alike.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import SpecFormatError

logger = logging.getLogger(__name__)

# Marks a schema as a named model
MODEL_DEF_KEY = "x-model-name"

# Raw reference kept after a `$ref` node was replaced by its target
ALTERNATIVE_REF_KEY = "x-original-ref"

# Reference kept by swagger-client when it resolves a document
SWAGGER_CLIENT_REF_KEY = "$$ref"

ID_ATTRIBUTE_KEY = "x-id-attribute"
DEFAULT_ID_ATTRIBUTE = "id"
ENUM_KEY_ATTRIBUTES_KEY = "x-enum-key-attributes"
ATTRIBUTE_ALIAS_KEY = "x-attribute-as"

PARENT_PREFIX = "parent"


def get_model_name(schema: Any) -> str | None:
    """Return the model name marker of a schema, if any."""
    if not isinstance(schema, dict):
        return None
    return schema.get(MODEL_DEF_KEY)


def get_ref(schema: dict[str, Any]) -> str | None:
    """Return the raw reference string of a schema.

    Checks `$ref`, then `$$ref`, then the loader's alternate key.
    """
    return schema.get("$ref") or schema.get(SWAGGER_CLIENT_REF_KEY) or schema.get(ALTERNATIVE_REF_KEY)


def parse_model_name(ref: str) -> str:
    """Extract the model name from a reference string.

    Examples:
        "#/components/schemas/Cat" -> "Cat"
        "#/definitions/Cat" -> "Cat"
    """
    return ref.rstrip("/").split("/")[-1]


def get_id_attribute(model: dict[str, Any], name: str | None = None) -> str | None:
    """Resolve the identity attribute of a model.

    Returns None when the schema has no properties or when a non-dotted
    identity attribute is not one of its properties. Warnings are logged
    only when `name` is given, i.e. when a top-level definition is skipped.
    """
    properties = model.get("properties")
    if not isinstance(properties, dict):
        if name:
            logger.warning(f"{name} is not a model definition")
        return None

    id_attribute = model.get(ID_ATTRIBUTE_KEY) or DEFAULT_ID_ATTRIBUTE
    if "." not in id_attribute and id_attribute not in properties:
        if name:
            logger.warning(f"{name} is not generated without id attribute {id_attribute!r}")
        return None
    return id_attribute


def is_model(schema: Any) -> bool:
    """Whether a schema node is a named model with a resolvable identity."""
    return bool(get_model_name(schema)) and get_id_attribute(schema) is not None


def apply_required(properties: dict[str, Any], required: Any) -> dict[str, Any]:
    """Flag required properties.

    Returns a new mapping in the same order; each required property is a
    shallow copy carrying `required: True`. The input is left untouched.
    """
    if not isinstance(required, list):
        return dict(properties)
    result = {}
    for key, prop in properties.items():
        if key in required and isinstance(prop, dict):
            prop = {**prop, "required": True}
        result[key] = prop
    return result


def get_definitions_root(spec: dict[str, Any], is_v2: bool = False) -> dict[str, Any]:
    """Return the mapping holding the schema definitions of a spec."""
    if is_v2:
        definitions = spec.get("definitions", spec)
    else:
        try:
            definitions = spec["components"]["schemas"]
        except (KeyError, TypeError) as e:
            raise SpecFormatError("OpenAPI document has no components.schemas") from e
    if not isinstance(definitions, dict):
        raise SpecFormatError("Schema definitions must be a mapping")
    return definitions


def get_model_definitions(spec: dict[str, Any], is_v2: bool = False) -> dict[str, dict[str, Any]]:
    """Collect named model definitions, keyed by model name.

    Definitions sharing a model name collapse to the last one.
    """
    models: dict[str, dict[str, Any]] = {}
    for model in get_definitions_root(spec, is_v2).values():
        model_name = get_model_name(model)
        if model_name:
            models[model_name] = model
    return models
