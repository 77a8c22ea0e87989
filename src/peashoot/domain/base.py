"""Shared pydantic configuration for every domain schema.

Schemas are frozen and exact-shape (unknown keys are rejected).  Scalar
fields use pydantic's strict types so a ``"12"`` never silently becomes
``12``.  JSON payloads use camelCase keys; Python code uses the
snake_case attribute names.  Both spellings are accepted on input and
aliases are used on output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DOMAIN_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
)


class DomainModel(BaseModel):
    """Base class for value objects and entities."""

    model_config = DOMAIN_MODEL_CONFIG
