"""Entity schemas: workspace → zone → item placement → item.

The base schemas leave every ``metadata`` slot open and optional.  The
``create_*`` factories specialize them by extending the base model: the
metadata slot becomes a *required* field of exactly the given shape, and
placements/zones are re-typed to carry the given item schema.  Factories
are cached, so specializing twice with the same arguments returns the
same class.

An ``item_schema`` may be a model class or any field type, including a
``ref_or_embed`` union.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Annotated, Any

from pydantic import AfterValidator, Field, StrictInt, StrictStr, create_model

from peashoot.domain.base import DomainModel
from peashoot.domain.validation import is_valid, schema_name
from peashoot.domain.values import ItemPresentation, XYCoordinate

# ---------------------------------------------------------------------------
# Collection invariants
# ---------------------------------------------------------------------------


def ensure_unique_ids[T](values: Sequence[T]) -> Sequence[T]:
    """Reject collections in which two members share an ``id``."""
    seen: set[str] = set()
    for value in values:
        entity_id = getattr(value, "id", None)
        if entity_id is None:
            continue
        if entity_id in seen:
            raise ValueError(f"duplicate id {entity_id!r}")
        seen.add(entity_id)
    return values


UNIQUE_IDS = AfterValidator(ensure_unique_ids)

# ---------------------------------------------------------------------------
# Item and packet
# ---------------------------------------------------------------------------


class Item(DomainModel):
    """A placeable instance of a domain thing (e.g. a plant)."""

    id: StrictStr
    category: StrictStr
    variant: StrictStr
    display_name: StrictStr
    size: StrictInt
    presentation: ItemPresentation
    metadata: Any = None


class Packet(DomainModel):
    """A purchasable or storable unit (e.g. a seed packet)."""

    id: StrictStr
    name: StrictStr
    description: StrictStr
    category: StrictStr
    presentation: ItemPresentation
    expires_at: StrictStr
    metadata: Any = None


@functools.cache
def create_item_type_with_metadata_schema(metadata_schema: Any) -> type[Item]:
    """Item whose ``metadata`` is required and of exactly *metadata_schema*."""
    return create_model(
        f"Item[{schema_name(metadata_schema)}]",
        __base__=Item,
        metadata=(metadata_schema, ...),
    )


@functools.cache
def create_packet_type_with_metadata_schema(metadata_schema: Any) -> type[Packet]:
    """Packet whose ``metadata`` is required and of exactly *metadata_schema*."""
    return create_model(
        f"Packet[{schema_name(metadata_schema)}]",
        __base__=Packet,
        metadata=(metadata_schema, ...),
    )


# ---------------------------------------------------------------------------
# Indicators
# ---------------------------------------------------------------------------


class IndicatorEffect(DomainModel):
    """Effect of one item on another, referenced by id (never embedded)."""

    source_id: StrictStr
    target_id: StrictStr
    description: StrictStr


class Indicator(DomainModel):
    id: StrictStr
    effects: list[IndicatorEffect]


# ---------------------------------------------------------------------------
# Placement, zone, workspace
# ---------------------------------------------------------------------------


class ItemPlacement(DomainModel):
    """Binds one item to a position inside a zone."""

    id: StrictStr
    position: XYCoordinate
    item: Item
    source_zone_id: StrictStr


class Zone(DomainModel):
    """Bounded rectangular area holding item placements."""

    id: StrictStr
    name: StrictStr
    description: StrictStr
    width: StrictInt = Field(ge=1)
    height: StrictInt = Field(ge=1)
    metadata: Any = None
    placements: Annotated[list[ItemPlacement], UNIQUE_IDS]


class Workspace(DomainModel):
    """Top-level aggregate: zones plus cross-item indicators."""

    id: StrictStr
    metadata: Any = None
    indicators: Annotated[list[Indicator], UNIQUE_IDS]
    zones: Annotated[list[Zone], UNIQUE_IDS]


@functools.cache
def create_item_placement_schema_for_item_type(item_schema: Any) -> type[ItemPlacement]:
    """Item placement whose ``item`` is of *item_schema*."""
    return create_model(
        f"ItemPlacement[{schema_name(item_schema)}]",
        __base__=ItemPlacement,
        item=(item_schema, ...),
    )


@functools.cache
def create_zone_schema_for_item_type(item_schema: Any, zone_metadata_schema: Any) -> type[Zone]:
    """Zone holding *item_schema* placements with required *zone_metadata_schema*."""
    placement = create_item_placement_schema_for_item_type(item_schema)
    return create_model(
        f"Zone[{schema_name(item_schema)}, {schema_name(zone_metadata_schema)}]",
        __base__=Zone,
        placements=(Annotated[list[placement], UNIQUE_IDS], ...),
        metadata=(zone_metadata_schema, ...),
    )


@functools.cache
def create_workspace_schema_for_item_type(
    item_schema: Any,
    workspace_metadata_schema: Any,
    zone_metadata_schema: Any,
) -> type[Workspace]:
    """Workspace whose zones and placements all carry *item_schema* items."""
    zone = create_zone_schema_for_item_type(item_schema, zone_metadata_schema)
    return create_model(
        f"Workspace[{schema_name(item_schema)}, {schema_name(workspace_metadata_schema)}]",
        __base__=Workspace,
        zones=(Annotated[list[zone], UNIQUE_IDS], ...),
        metadata=(workspace_metadata_schema, ...),
    )


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_item(value: object) -> bool:
    return is_valid(Item, value)


def is_packet(value: object) -> bool:
    return is_valid(Packet, value)


def is_item_placement(value: object) -> bool:
    return is_valid(ItemPlacement, value)


def is_zone(value: object) -> bool:
    return is_valid(Zone, value)


def is_workspace(value: object) -> bool:
    return is_valid(Workspace, value)


def is_indicator(value: object) -> bool:
    return is_valid(Indicator, value)


# ---------------------------------------------------------------------------
# Workspace operations
# ---------------------------------------------------------------------------


def find_zone[W: Workspace](workspace: W, zone_id: str) -> Zone | None:
    return next((zone for zone in workspace.zones if zone.id == zone_id), None)


def move_item_between_zones[W: Workspace](
    workspace: W,
    source_zone_id: str,
    target_zone_id: str,
    placement: ItemPlacement,
    x: float,
    y: float,
) -> W:
    """Return a new workspace with *placement* moved to ``(x, y)`` in the target zone.

    The placement's ``source_zone_id`` is rewritten to the target zone.
    If either zone is missing the workspace is returned unchanged.
    """
    source = find_zone(workspace, source_zone_id)
    target = find_zone(workspace, target_zone_id)
    if source is None or target is None:
        return workspace

    moved = placement.model_copy(
        update={"position": XYCoordinate(x=x, y=y), "source_zone_id": target_zone_id}
    )
    remaining = [p for p in source.placements if p.id != placement.id]

    zones: list[Zone] = []
    for zone in workspace.zones:
        if zone.id == source_zone_id and zone.id == target_zone_id:
            zone = zone.model_copy(update={"placements": [*remaining, moved]})
        elif zone.id == source_zone_id:
            zone = zone.model_copy(update={"placements": remaining})
        elif zone.id == target_zone_id:
            zone = zone.model_copy(update={"placements": [*target.placements, moved]})
        zones.append(zone)
    return workspace.model_copy(update={"zones": zones})
