"""CatalogService: plants, seed packets and schema validation."""

from __future__ import annotations

import asyncio
import logging
import math
from pathlib import Path
from typing import Any

from peashoot.domain.errors import PeashootError
from peashoot.domain.plants import Plant, PlantMetadata, PlantRecord
from peashoot.domain.registry import SCHEMA_REGISTRY, get_schema
from peashoot.domain.resources import ListItemsResponse, ListPacketsResponse
from peashoot.domain.validation import dump, parse, parse_async, schema_name
from peashoot.domain.values import Distance, convert_distance_to_feet
from peashoot.infrastructure.fixtures import load_document
from peashoot.services.base import BaseService, dump_validated
from peashoot.services.result import BAD_REQUEST, ServiceResult, error_result, failure

logger = logging.getLogger(__name__)


def plant_size(planting_distance: Distance) -> int:
    """Grid footprint of a plant: its spacing in whole feet, at least 1."""
    feet = convert_distance_to_feet(planting_distance).value
    return max(1, math.ceil(feet))


def plant_to_item(record: PlantRecord) -> Plant:
    """Shape a stored plant into a placeable item."""
    return Plant(
        id=record.id,
        category=record.family,
        variant=record.variant,
        display_name=record.name,
        size=plant_size(record.planting_distance),
        presentation=record.presentation,
        metadata=PlantMetadata(planting_distance=record.planting_distance),
    )


class CatalogService(BaseService):
    """Read-only catalog operations."""

    def list_items(self) -> ServiceResult:
        op = "list_items"
        try:
            items = [plant_to_item(record) for record in self._repository.plants()]
            payload = dump_validated(ListItemsResponse, items)
        except PeashootError as exc:
            logger.warning("%s failed: %s", op, exc)
            return error_result(op, exc)
        return ServiceResult(ok=True, op=op, data={"count": len(payload), "items": payload})

    def list_packets(self) -> ServiceResult:
        op = "list_packets"
        disabled = self._require_feature(op, "seed_packets")
        if disabled is not None:
            return disabled
        try:
            payload = dump_validated(ListPacketsResponse, self._repository.seed_packets())
        except PeashootError as exc:
            logger.warning("%s failed: %s", op, exc)
            return error_result(op, exc)
        return ServiceResult(ok=True, op=op, data={"count": len(payload), "items": payload})

    # ── Validation ────────────────────────────────────────────────

    @staticmethod
    def _unknown_kind(op: str, kind: str) -> ServiceResult:
        return failure(
            op,
            "UNKNOWN_KIND",
            f"Unknown schema kind: {kind}",
            status=BAD_REQUEST,
            detail={"kinds": sorted(SCHEMA_REGISTRY)},
        )

    def validate_payload(self, kind: str, data: Any) -> ServiceResult:
        """Validate already-decoded *data* against the schema named *kind*."""
        op = "validate"
        try:
            schema = get_schema(kind)
        except KeyError:
            return self._unknown_kind(op, kind)
        try:
            value = parse(schema, data)
        except PeashootError as exc:
            logger.debug("%s %s rejected: %s", op, kind, exc)
            return error_result(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": kind, "schema": schema_name(schema), "value": dump(value)},
        )

    async def validate_document(self, kind: str, path: Path) -> ServiceResult:
        """Read a YAML/JSON document off the event loop and validate it."""
        op = "validate"
        try:
            schema = get_schema(kind)
        except KeyError:
            return self._unknown_kind(op, kind)
        try:
            value = await parse_async(schema, asyncio.to_thread(load_document, path))
        except PeashootError as exc:
            logger.debug("%s %s rejected: %s", op, path, exc)
            return error_result(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": kind,
                "schema": schema_name(schema),
                "path": str(path),
                "value": dump(value),
            },
        )
