"""Command group: locations and planting dates."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

import click

from peashoot.commands._base import PeashootGroup
from peashoot.services.locations import LocationService

if TYPE_CHECKING:
    from peashoot.commands._context import AppContext

_LOCATIONS_EXAMPLES = """\
  peashoot locations list
  peashoot locations show loc_1a2b3c4d
  peashoot locations calculate-date loc_1a2b3c4d --temperature 50F
  peashoot --json locations calculate-date loc_1a2b3c4d -t 10C --today 2025-03-15"""

_TEMPERATURE_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*([CcFf])\s*$")


class TemperatureParam(click.ParamType):
    """``50F`` / ``10.5C`` → a temperature payload."""

    name = "temperature"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> dict[str, Any]:
        if isinstance(value, dict):
            return value
        match = _TEMPERATURE_RE.match(str(value))
        if match is None:
            self.fail(f"{value!r} is not a temperature like 50F or 10C", param, ctx)
        return {"value": float(match.group(1)), "unit": match.group(2).upper()}


@click.group(cls=PeashootGroup, examples=_LOCATIONS_EXAMPLES)
@click.pass_obj
def locations(app: AppContext) -> None:
    """Browse locations and calculate planting dates."""


@locations.command(name="list", examples="  peashoot locations list\n  peashoot -q locations list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List known locations."""
    app.emit(LocationService(app.repository, app.settings).list_locations())


@locations.command(examples="  peashoot locations show loc_1a2b3c4d")
@click.argument("location_id")
@click.pass_obj
def show(app: AppContext, location_id: str) -> None:
    """Show a location and its monthly temperature ranges."""
    app.emit(LocationService(app.repository, app.settings).get_location(location_id))


@locations.command(
    name="calculate-date",
    examples="""\
  peashoot locations calculate-date loc_1a2b3c4d --temperature 50F
  peashoot -q locations calculate-date loc_1a2b3c4d -t 10C --today 2025-03-15""",
)
@click.argument("location_id")
@click.option(
    "-t",
    "--temperature",
    type=TemperatureParam(),
    required=True,
    help="Target temperature, e.g. 50F or 10C.",
)
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Start the search from this date instead of today.",
)
@click.pass_obj
def calculate_date(
    app: AppContext,
    location_id: str,
    temperature: dict[str, Any],
    today: datetime | None,
) -> None:
    """Earliest date the location's monthly range reaches TEMPERATURE."""
    start: date | None = today.date() if today else None
    request = {"locationId": location_id, "temperature": temperature}
    service = LocationService(app.repository, app.settings)
    app.emit(service.calculate_date(request, today=start))
