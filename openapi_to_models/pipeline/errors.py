"""
Exceptions raised by the model generation pipeline.
"""

from __future__ import annotations


class ModelGenerationError(Exception):
    """Base class for errors that abort model generation."""

    pass


class SpecFormatError(ModelGenerationError):
    """Raised when the spec document does not have the expected shape.

    This can happen when:
    - An OpenAPI 3 document has no `components.schemas` root
    - A local `$ref` points at a node that does not exist
    """

    pass


class UnionResolutionError(ModelGenerationError):
    """Raised when a discriminated union cannot be resolved.

    This can happen when:
    - A `oneOf` branch is not a named model
    - A discriminator mapping entry matches no branch
    - A discriminator mapping entry matches more than one branch
    """

    pass
