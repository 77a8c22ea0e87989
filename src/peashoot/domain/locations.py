"""Locations and their monthly temperature ranges.

Two shapes live here:

- :class:`Location`: the entity served to clients; months are 0-based
  (January = 0) and ranges use :class:`Temperature` records.
- :class:`TemperatureData`: the seed-file format used to load locations;
  months are 1-based and temperatures are ``[value, unit]`` pairs.
  :func:`locations_from_temperature_data` converts one to the other.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, Field, StrictFloat, StrictInt, StrictStr

from peashoot.domain.base import DomainModel
from peashoot.domain.entities import UNIQUE_IDS
from peashoot.domain.ids import ID_PREFIXES, generate_content_id
from peashoot.domain.values import Temperature, TemperatureRange, TemperatureUnit

MONTHS_PER_YEAR = 12


class LocationMonthlyTemperature(DomainModel):
    id: StrictStr
    month: StrictInt = Field(ge=0, le=MONTHS_PER_YEAR - 1)
    temperature_range: TemperatureRange


class Location(DomainModel):
    id: StrictStr
    name: StrictStr
    region: StrictStr
    country: StrictStr
    monthly_temperatures: Annotated[list[LocationMonthlyTemperature], UNIQUE_IDS] = Field(
        default_factory=list
    )

    def temperature_for_month(self, month: int) -> LocationMonthlyTemperature | None:
        """Return the 0-based *month*'s entry, if the location has one."""
        return next((m for m in self.monthly_temperatures if m.month == month), None)


# ---------------------------------------------------------------------------
# Seed-file format
# ---------------------------------------------------------------------------

TemperaturePair = tuple[StrictFloat, Literal["C", "F"]]


class SeedTemperatureRange(DomainModel):
    min: TemperaturePair
    max: TemperaturePair


class SeedMonthlyTemperature(DomainModel):
    month: StrictInt = Field(ge=1, le=MONTHS_PER_YEAR, description="Month number (1-12)")
    temperature_range: SeedTemperatureRange


def _ensure_distinct_months(
    entries: list[SeedMonthlyTemperature],
) -> list[SeedMonthlyTemperature]:
    months = [entry.month for entry in entries]
    if len(set(months)) != len(months):
        raise ValueError("each month must appear exactly once")
    return entries


class SeedLocation(DomainModel):
    name: StrictStr = Field(min_length=1)
    region: StrictStr = Field(min_length=1)
    country: StrictStr = Field(min_length=1)
    monthly_temperatures: Annotated[
        list[SeedMonthlyTemperature], AfterValidator(_ensure_distinct_months)
    ] = Field(
        min_length=MONTHS_PER_YEAR,
        max_length=MONTHS_PER_YEAR,
        description="Temperature data for all 12 months",
    )


class TemperatureData(DomainModel):
    locations: list[SeedLocation] = Field(min_length=1)


def _temperature(pair: TemperaturePair) -> Temperature:
    value, unit = pair
    return Temperature(value=value, unit=TemperatureUnit(unit))


def locations_from_temperature_data(data: TemperatureData) -> list[Location]:
    """Build :class:`Location` entities (0-based months) from seed data."""
    locations: list[Location] = []
    for seed in data.locations:
        location_id = generate_content_id(
            ID_PREFIXES["location"], seed.name, seed.region, seed.country
        )
        monthly = [
            LocationMonthlyTemperature(
                id=generate_content_id(
                    ID_PREFIXES["location_temperature"], location_id, str(entry.month)
                ),
                month=entry.month - 1,
                temperature_range=TemperatureRange(
                    min=_temperature(entry.temperature_range.min),
                    max=_temperature(entry.temperature_range.max),
                ),
            )
            for entry in sorted(seed.monthly_temperatures, key=lambda m: m.month)
        ]
        locations.append(
            Location(
                id=location_id,
                name=seed.name,
                region=seed.region,
                country=seed.country,
                monthly_temperatures=monthly,
            )
        )
    return locations
