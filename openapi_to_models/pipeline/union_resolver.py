"""
Resolution of discriminated unions (`oneOf` + `discriminator`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..utils import schema_name
from .errors import UnionResolutionError
from .spec_source import get_id_attribute, get_model_name, get_ref


@dataclass
class UnionBranch:
    """One model of a discriminated union."""

    name: str = ""
    schema_name: str = ""
    ref: str | None = None  # Raw reference string, matched against mapping entries
    schema: dict[str, Any] = field(default_factory=dict)


@dataclass
class UnionDescriptor:
    """A resolved discriminated union."""

    property_name: str = ""
    mapping: dict[str, str] = field(default_factory=dict)  # discriminator value -> schema name
    branches: list[UnionBranch] = field(default_factory=list)
    key: str | None = None  # Placeholder key, assigned by the walker

    @property
    def model_names(self) -> list[str]:
        """Branch model names, de-duplicated in declaration order."""
        return list(dict.fromkeys(branch.name for branch in self.branches))


def resolve_one_of(schema: dict[str, Any]) -> UnionDescriptor:
    """Build the discriminator value to schema name mapping of a union.

    With an explicit `discriminator.mapping`, each entry must match exactly
    one branch by raw reference string. Without one, each branch maps its
    own model name to its own schema name.

    Raises:
        UnionResolutionError: If the discriminator is not an object, a branch
            is not a named model with an identity attribute, or a mapping
            entry matches zero or several branches
    """
    discriminator = schema["discriminator"]
    if not isinstance(discriminator, dict):
        raise UnionResolutionError(f"Discriminator must be an object, got {discriminator!r}")
    property_name = discriminator.get("propertyName", "")
    mapping = discriminator.get("mapping")

    branches = []
    for index, branch_schema in enumerate(schema["oneOf"]):
        model_name = get_model_name(branch_schema)
        if not model_name:
            raise UnionResolutionError(f"oneOf branch #{index} of discriminator {property_name!r} is not a named model")
        # Every branch must be a generated model
        if get_id_attribute(branch_schema) is None:
            raise UnionResolutionError(f"oneOf branch {model_name} of discriminator {property_name!r} has no identity attribute")
        branches.append(
            UnionBranch(
                name=model_name,
                schema_name=schema_name(model_name),
                ref=get_ref(branch_schema),
                schema=branch_schema,
            )
        )

    union = UnionDescriptor(property_name=property_name, branches=branches)
    if mapping:
        for key, ref in mapping.items():
            matches = [branch for branch in branches if branch.ref == ref]
            if len(matches) != 1:
                found = "no branch" if not matches else f"{len(matches)} branches"
                raise UnionResolutionError(f"Discriminator mapping {key!r} -> {ref!r} matches {found} of the oneOf")
            union.mapping[key] = matches[0].schema_name
    else:
        for branch in branches:
            union.mapping[branch.name] = branch.schema_name
    return union
