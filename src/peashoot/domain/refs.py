"""Reference-or-embed relation fields.

A relation field may hold either a lightweight reference ``{"id":
"<prefix>_<opaque>"}`` or the fully embedded value.  :func:`ref_or_embed`
builds that as an ordered union validated left to right: the reference
branch is tried first and, when it matches, the embedded branch is never
attempted.  When neither matches, the issues of both branches are
reported.

Known ambiguity: an embedded value whose only field is an ``id`` carrying
the right prefix (``{"id": "plant_123"}``) is classified as a reference.
This is kept as-is; disambiguating would need an explicit discriminator
field in the payload.
"""

from __future__ import annotations

import functools
from typing import Annotated, Any, Union

from pydantic import Field, StrictStr, StringConstraints, create_model

from peashoot.domain.base import DomainModel
from peashoot.domain.ids import ID_SEPARATOR


class Ref(DomainModel):
    """Bare reference to another entity, by id only."""

    id: StrictStr


@functools.cache
def ref_model(prefix: str) -> type[Ref]:
    """Exact-shape ``{id}`` model whose id must carry *prefix*."""
    if not prefix.isidentifier():
        raise ValueError(f"Reference prefix must be a plain identifier, got {prefix!r}")
    pattern = rf"^{prefix}{ID_SEPARATOR}[\s\S]+$"
    return create_model(
        f"Ref[{prefix}]",
        __base__=Ref,
        id=(Annotated[StrictStr, StringConstraints(pattern=pattern)], ...),
    )


@functools.cache
def ref_or_embed(prefix: str, embedded: Any) -> Any:
    """Field type accepting a ``prefix``-checked reference or an *embedded* value."""
    return Annotated[Union[ref_model(prefix), embedded], Field(union_mode="left_to_right")]


@functools.cache
def refs_or_embed_many(embedded: Any, prefix: str | None = None) -> Any:
    """List-valued counterpart of :func:`ref_or_embed`.

    The list is homogeneous: all references or all embedded values.
    Without *prefix*, references are checked for shape only.
    """
    ref = ref_model(prefix) if prefix is not None else Ref
    return Annotated[Union[list[ref], list[embedded]], Field(union_mode="left_to_right")]


def is_ref(value: object) -> bool:
    """True when a validated relation value is a reference, not an embed."""
    return isinstance(value, Ref)
