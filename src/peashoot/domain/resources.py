"""Request/response contracts for the outward-facing resources.

List responses are plain ordered sequences of validated entities.
"""

from __future__ import annotations

from datetime import date

from pydantic import StrictStr

from peashoot.domain.base import DomainModel
from peashoot.domain.entities import Item, Packet, Workspace
from peashoot.domain.locations import Location
from peashoot.domain.values import Temperature

ListItemsResponse = list[Item]
ListPacketsResponse = list[Packet]
ListWorkspacesResponse = list[Workspace]
ListLocationsResponse = list[Location]


class EmptyRequest(DomainModel):
    """List endpoints take no parameters."""


class CalculateDateRequest(DomainModel):
    location_id: StrictStr
    temperature: Temperature


class CalculateDateResponse(DomainModel):
    date: StrictStr

    @classmethod
    def for_date(cls, value: date) -> CalculateDateResponse:
        return cls(date=value.isoformat())
