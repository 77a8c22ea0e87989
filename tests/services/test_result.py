"""Tests for ServiceResult and domain-error translation."""

import json

import pytest

from peashoot.domain.errors import (
    AsyncValidationFailure,
    InvalidArgumentError,
    SchemaValidationError,
    UnsupportedUnitError,
    ValidationIssue,
)
from peashoot.services.result import (
    BAD_REQUEST,
    INTERNAL_ERROR,
    ServiceError,
    ServiceResult,
    error_result,
    failure,
    status_for,
)


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="list_items", data={"count": 0})
        assert result.ok is True
        assert result.warnings == []
        assert result.error is None

    def test_json_serialization(self) -> None:
        result = failure("get_location", "NOT_FOUND", "missing", status=404)
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["status"] == 404

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_error_defaults(self) -> None:
        error = ServiceError(code="E", message="m")
        assert error.status == INTERNAL_ERROR
        assert error.detail == {}


class TestErrorResult:
    def test_schema_error_is_client_error_with_issues(self) -> None:
        exc = SchemaValidationError(
            [ValidationIssue("metadata.plantingDistance.unit", "bad unit")],
            schema_name="Item[PlantMetadata]",
        )
        result = error_result("validate", exc)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.status == BAD_REQUEST
        assert result.error.detail["issues"] == [
            {"path": "metadata.plantingDistance.unit", "message": "bad unit"}
        ]

    def test_invalid_argument(self) -> None:
        result = error_result("get_location", InvalidArgumentError("locationId", "required"))
        assert result.error is not None
        assert result.error.status == BAD_REQUEST
        assert result.error.detail == {"argument": "locationId", "reason": "required"}

    def test_async_failure(self) -> None:
        exc = AsyncValidationFailure("read failed", original_error=OSError("gone"))
        result = error_result("validate", exc)
        assert result.error is not None
        assert result.error.status == BAD_REQUEST
        assert result.error.detail == {"cause": "OSError"}

    def test_unsupported_unit_is_server_error(self) -> None:
        assert status_for(UnsupportedUnitError("K", "temperature")) == INTERNAL_ERROR
