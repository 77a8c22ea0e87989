"""LocationService: locations and planting-date calculation.

``calculate_date`` answers: given a location and a soil/air temperature a
plant needs, when is the earliest date at which that month's average
range contains the temperature?  Months are scanned forward from *today*
for ``planting.horizon_months`` months; a matching future month yields
its first day, a matching current month yields *today*.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from peashoot.domain.comparators import temperature_in_range
from peashoot.domain.errors import InvalidArgumentError, PeashootError
from peashoot.domain.locations import MONTHS_PER_YEAR, Location
from peashoot.domain.resources import (
    CalculateDateRequest,
    CalculateDateResponse,
    ListLocationsResponse,
)
from peashoot.domain.validation import dump, parse
from peashoot.domain.values import Temperature, to_celsius
from peashoot.services.base import BaseService, dump_validated
from peashoot.services.result import (
    NOT_FOUND,
    UNPROCESSABLE,
    ServiceResult,
    error_result,
    failure,
)

logger = logging.getLogger(__name__)


def first_planting_date(
    location: Location,
    temperature: Temperature,
    today: date,
    horizon_months: int = MONTHS_PER_YEAR,
) -> date | None:
    """Earliest date on or after *today* whose month range holds *temperature*."""
    for offset in range(horizon_months):
        index = today.month - 1 + offset
        year, month = today.year + index // MONTHS_PER_YEAR, index % MONTHS_PER_YEAR
        entry = location.temperature_for_month(month)
        if entry is None or not temperature_in_range(temperature, entry.temperature_range):
            continue
        return max(date(year, month + 1, 1), today)
    return None


def _check_location_id(location_id: Any) -> str:
    if not isinstance(location_id, str) or not location_id.strip():
        raise InvalidArgumentError("locationId", "a location id is required")
    return location_id


class LocationService(BaseService):
    """Location lookups and planting-date calculation."""

    def _not_found(self, op: str, location_id: str) -> ServiceResult:
        return failure(
            op,
            "NOT_FOUND",
            f"No location with id '{location_id}'",
            status=NOT_FOUND,
            detail={"locationId": location_id},
        )

    def list_locations(self) -> ServiceResult:
        op = "list_locations"
        try:
            payload = dump_validated(ListLocationsResponse, self._repository.locations())
        except PeashootError as exc:
            logger.warning("%s failed: %s", op, exc)
            return error_result(op, exc)
        return ServiceResult(ok=True, op=op, data={"count": len(payload), "items": payload})

    def get_location(self, location_id: Any) -> ServiceResult:
        op = "get_location"
        try:
            checked = _check_location_id(location_id)
            location = self._repository.get_location(checked)
        except PeashootError as exc:
            return error_result(op, exc)
        if location is None:
            return self._not_found(op, checked)
        return ServiceResult(ok=True, op=op, data=dump(location))

    def calculate_date(self, request: Any, *, today: date | None = None) -> ServiceResult:
        """Earliest planting date for a decoded ``CalculateDateRequest`` payload."""
        op = "calculate_date"
        disabled = self._require_feature(op, "calculate_date")
        if disabled is not None:
            return disabled

        today = today or date.today()
        try:
            parsed: CalculateDateRequest = parse(CalculateDateRequest, request)
            location_id = _check_location_id(parsed.location_id)
            location = self._repository.get_location(location_id)
        except PeashootError as exc:
            logger.debug("%s rejected: %s", op, exc)
            return error_result(op, exc)
        if location is None:
            return self._not_found(op, location_id)

        horizon = self._settings.planting.horizon_months
        found = first_planting_date(location, parsed.temperature, today, horizon)
        if found is None:
            return failure(
                op,
                "NO_MATCHING_MONTH",
                f"No month within {horizon} months of {today.isoformat()} "
                f"reaches {to_celsius(parsed.temperature):.1f}C at {location.name}",
                status=UNPROCESSABLE,
                detail={"locationId": location_id, "horizonMonths": horizon},
            )

        logger.debug("%s: %s at %s -> %s", op, parsed.temperature, location_id, found)
        response = CalculateDateResponse.for_date(found)
        return ServiceResult(ok=True, op=op, data=dump(response))
