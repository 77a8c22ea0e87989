"""Primary validators for every schema.

``parse`` is the throwing form used at system boundaries: on mismatch it
raises :class:`SchemaValidationError` carrying every issue, in order,
with a dotted field path (``metadata.plantingDistance.unit``).
``is_valid`` is the non-throwing predicate used for runtime narrowing.

A *schema* is anything pydantic can build a validator for: a model
class, a ``list[...]`` of one, or an annotated type such as a
``ref_or_embed`` field type.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from peashoot.domain.errors import (
    AsyncValidationFailure,
    SchemaValidationError,
    ValidationIssue,
)


@functools.cache
def _cached_adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def _adapter(schema: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(schema)
    except TypeError:
        # Unhashable schema description; build an uncached adapter.
        return TypeAdapter(schema)


def schema_name(schema: Any) -> str:
    """Short human-readable name for a schema description."""
    origin = get_origin(schema)
    args = get_args(schema)
    if origin is Annotated:
        return schema_name(args[0])
    if origin in (Union, UnionType):
        return " | ".join(schema_name(arg) for arg in args)
    if origin is not None and args:
        inner = ", ".join(schema_name(arg) for arg in args)
        name = getattr(origin, "__name__", str(origin))
        return f"{name}[{inner}]"
    return getattr(schema, "__name__", None) or repr(schema)


def format_path(loc: tuple[int | str, ...]) -> str:
    """Join a pydantic error location into a dotted path."""
    return ".".join(str(part) for part in loc)


def issues_from_error(error: ValidationError) -> list[ValidationIssue]:
    """Convert a pydantic error into ordered issues."""
    return [
        ValidationIssue(path=format_path(detail["loc"]), message=detail["msg"])
        for detail in error.errors(include_url=False)
    ]


def parse(schema: Any, data: Any) -> Any:
    """Validate *data* against *schema* and return the typed value.

    Raises:
        SchemaValidationError: With the full ordered issue list.
    """
    try:
        return _adapter(schema).validate_python(data)
    except ValidationError as exc:
        raise SchemaValidationError(issues_from_error(exc), schema_name=schema_name(schema)) from exc


def is_valid(schema: Any, data: Any) -> bool:
    """Non-throwing structural check."""
    try:
        _adapter(schema).validate_python(data)
    except ValidationError:
        return False
    return True


async def parse_async(schema: Any, pending: Awaitable[Any]) -> Any:
    """Await *pending* and validate its result against *schema*.

    Schema failures propagate as :class:`SchemaValidationError`.  Any other
    failure while producing the value is wrapped in
    :class:`AsyncValidationFailure` with the original error attached.
    """
    try:
        data = await pending
    except SchemaValidationError:
        raise
    except Exception as exc:
        raise AsyncValidationFailure(
            f"Could not obtain a value to validate against {schema_name(schema)}: {exc}",
            original_error=exc,
        ) from exc
    return parse(schema, data)


def dump(value: Any) -> Any:
    """Serialize a validated value to JSON-compatible data, by alias."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [dump(item) for item in value]
    return value
