"""Value objects: immutable physical and geometric quantities.

Conversions are pure, total functions over well-typed inputs.  Unit
matching is exhaustive: the fallback branch of every ``match`` raises
:class:`UnsupportedUnitError` so that adding a unit to an enum without
updating its conversions fails loudly instead of defaulting.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import StrictFloat, StrictStr

from peashoot.domain.base import DomainModel
from peashoot.domain.errors import UnsupportedUnitError

# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------


class DistanceUnit(StrEnum):
    INCHES = "inches"
    FEET = "feet"
    YARDS = "yards"
    METERS = "meters"
    CENTIMETERS = "centimeters"


class Distance(DomainModel):
    value: StrictFloat
    unit: DistanceUnit


def convert_distance_to_feet(distance: Distance) -> Distance:
    """Return *distance* expressed in feet."""
    match distance.unit:
        case DistanceUnit.INCHES:
            feet = distance.value / 12
        case DistanceUnit.FEET:
            feet = distance.value
        case DistanceUnit.YARDS:
            feet = distance.value * 3
        case DistanceUnit.METERS:
            feet = distance.value * 3.28084
        case DistanceUnit.CENTIMETERS:
            feet = distance.value * 0.0328084
        case unit:
            raise UnsupportedUnitError(unit, "distance")
    return Distance(value=feet, unit=DistanceUnit.FEET)


def format_number(value: float) -> str:
    """Render *value* without a trailing ``.0`` when it is integral."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def distance_to_human_readable(distance: Distance) -> str:
    return f"{format_number(distance.value)}{distance.unit.value}"


# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class Temperature(DomainModel):
    value: StrictFloat
    unit: TemperatureUnit


class TemperatureRange(DomainModel):
    min: Temperature
    max: Temperature


type TemperatureLike = Temperature | Mapping[str, Any] | tuple[float, str]


def to_celsius(temperature: TemperatureLike) -> float:
    """Normalize a temperature to degrees Celsius.

    Accepts a :class:`Temperature`, a ``{"value", "unit"}`` mapping, or a
    ``(value, unit)`` pair.
    """
    if isinstance(temperature, Temperature):
        value, unit = temperature.value, temperature.unit
    elif isinstance(temperature, Mapping):
        value, unit = temperature["value"], temperature["unit"]
    else:
        value, unit = temperature

    match unit:
        case TemperatureUnit.CELSIUS:
            return value
        case TemperatureUnit.FAHRENHEIT:
            return (value - 32) * 5 / 9
        case _:
            raise UnsupportedUnitError(unit, "temperature")


# ---------------------------------------------------------------------------
# Color, geometry, presentation
# ---------------------------------------------------------------------------


class RGBColor(DomainModel):
    red: StrictFloat
    green: StrictFloat
    blue: StrictFloat
    alpha: StrictFloat | None = None


_BLACK = RGBColor(red=0, green=0, blue=0)


def rgb_to_css(color: RGBColor = _BLACK) -> str:
    channels = ", ".join(format_number(c) for c in (color.red, color.green, color.blue))
    return f"rgb({channels})"


def rgba_to_css(color: RGBColor, default_alpha: float = 0.4) -> str:
    """Render *color* as a CSS ``rgba()`` string, filling in a missing alpha."""
    alpha = default_alpha if color.alpha is None else color.alpha
    channels = ", ".join(format_number(c) for c in (color.red, color.green, color.blue, alpha))
    return f"rgba({channels})"


class XYCoordinate(DomainModel):
    x: StrictFloat
    y: StrictFloat


class ItemPresentation(DomainModel):
    """Fixed look of an item or packet: icon path plus accent color."""

    icon_path: StrictStr
    accent_color: RGBColor
