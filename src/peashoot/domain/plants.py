"""Garden specializations of the generic entity schemas.

- ``Plant`` = ``Item`` + :class:`PlantMetadata`
- ``SeedPacket`` = ``Packet`` + :class:`SeedPacketMetadata`
- ``GardenBed`` / ``Garden`` = ``Zone`` / ``Workspace`` whose placements
  hold plants, either by reference (``{"id": "plant_..."}``) or embedded.
"""

from __future__ import annotations

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from peashoot.domain.base import DomainModel
from peashoot.domain.entities import (
    create_item_placement_schema_for_item_type,
    create_item_type_with_metadata_schema,
    create_packet_type_with_metadata_schema,
    create_workspace_schema_for_item_type,
    create_zone_schema_for_item_type,
)
from peashoot.domain.ids import ID_PREFIXES
from peashoot.domain.refs import ref_or_embed
from peashoot.domain.validation import is_valid
from peashoot.domain.values import Distance, ItemPresentation


class PlantMetadata(DomainModel):
    planting_distance: Distance


class SeedPacketMetadata(DomainModel):
    quantity: StrictInt = Field(ge=0)
    planting_instructions: StrictStr
    net_weight_grams: StrictFloat = Field(ge=0)
    origin_location: StrictStr


class GardenBedMetadata(DomainModel):
    water_level: StrictFloat = Field(ge=0)
    sun_level: StrictFloat = Field(ge=0)


class GardenMetadata(DomainModel):
    name: StrictStr
    description: StrictStr


Plant = create_item_type_with_metadata_schema(PlantMetadata)
SeedPacket = create_packet_type_with_metadata_schema(SeedPacketMetadata)

PlantRefOrEmbed = ref_or_embed(ID_PREFIXES["plant"], Plant)
SeedPacketRefOrEmbed = ref_or_embed(ID_PREFIXES["seed_packet"], SeedPacket)

PlantPlacement = create_item_placement_schema_for_item_type(PlantRefOrEmbed)
GardenBed = create_zone_schema_for_item_type(PlantRefOrEmbed, GardenBedMetadata)
Garden = create_workspace_schema_for_item_type(PlantRefOrEmbed, GardenMetadata, GardenBedMetadata)


class PlantParams(DomainModel):
    """Payload for creating a plant from a seed packet."""

    name: StrictStr
    description: StrictStr
    family: StrictStr
    presentation: ItemPresentation
    planting_distance: Distance
    seed_packet: SeedPacketRefOrEmbed  # type: ignore[valid-type]


class PlantRecord(PlantParams):
    """Stored plant, as the catalog keeps it before it is shaped into an item."""

    id: StrictStr
    variant: StrictStr


def is_plant_metadata(value: object) -> bool:
    return is_valid(PlantMetadata, value)


def is_seed_packet_metadata(value: object) -> bool:
    return is_valid(SeedPacketMetadata, value)


def is_plant(value: object) -> bool:
    return is_valid(Plant, value)


def is_seed_packet(value: object) -> bool:
    return is_valid(SeedPacket, value)
