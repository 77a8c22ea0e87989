"""Named schema registry.

Maps the kind names accepted at the boundary (``peashoot validate KIND``)
to their schemas.
"""

from __future__ import annotations

from typing import Any

from peashoot.domain.entities import Indicator, Item, ItemPlacement, Packet, Workspace, Zone
from peashoot.domain.locations import Location, TemperatureData
from peashoot.domain.plants import (
    Garden,
    GardenBed,
    Plant,
    PlantMetadata,
    PlantParams,
    PlantPlacement,
    SeedPacket,
    SeedPacketMetadata,
)
from peashoot.domain.resources import (
    CalculateDateRequest,
    ListItemsResponse,
    ListLocationsResponse,
    ListPacketsResponse,
    ListWorkspacesResponse,
)

SCHEMA_REGISTRY: dict[str, Any] = {
    "item": Item,
    "packet": Packet,
    "item-placement": ItemPlacement,
    "zone": Zone,
    "workspace": Workspace,
    "indicator": Indicator,
    "plant": Plant,
    "plant-metadata": PlantMetadata,
    "plant-params": PlantParams,
    "plant-placement": PlantPlacement,
    "seed-packet": SeedPacket,
    "seed-packet-metadata": SeedPacketMetadata,
    "garden-bed": GardenBed,
    "garden": Garden,
    "location": Location,
    "temperature-data": TemperatureData,
    "calculate-date-request": CalculateDateRequest,
    "items": ListItemsResponse,
    "packets": ListPacketsResponse,
    "workspaces": ListWorkspacesResponse,
    "locations": ListLocationsResponse,
}


def get_schema(kind: str) -> Any:
    """Look up a schema by kind name.

    Raises:
        KeyError: If no schema is registered under *kind*.
    """
    return SCHEMA_REGISTRY[kind]
