"""Tests for the error taxonomy."""

from peashoot.domain.errors import (
    AsyncValidationFailure,
    InvalidArgumentError,
    PeashootError,
    SchemaValidationError,
    UnsupportedUnitError,
    ValidationIssue,
)


class TestSchemaValidationError:
    def test_carries_ordered_issues(self) -> None:
        issues = [ValidationIssue("a", "missing"), ValidationIssue("b.c", "bad")]
        error = SchemaValidationError(issues, schema_name="Thing")
        assert error.paths == ["a", "b.c"]
        assert error.code == "VALIDATION_ERROR"
        assert str(error) == "Thing failed validation with 2 issues"

    def test_to_dict(self) -> None:
        error = SchemaValidationError([ValidationIssue("x", "required")])
        assert error.to_dict() == {
            "schema": None,
            "issues": [{"path": "x", "message": "required"}],
        }
        assert str(error) == "input failed validation with 1 issue"


class TestOtherErrors:
    def test_invalid_argument(self) -> None:
        error = InvalidArgumentError("locationId", "required")
        assert error.name == "locationId"
        assert "locationId" in str(error)
        assert error.code == "INVALID_ARGUMENT"

    def test_unsupported_unit(self) -> None:
        error = UnsupportedUnitError("K", "temperature")
        assert str(error) == "Unsupported temperature unit: 'K'"

    def test_async_failure_keeps_cause(self) -> None:
        cause = TimeoutError("slow")
        error = AsyncValidationFailure("failed", original_error=cause)
        assert error.original_error is cause

    def test_common_base(self) -> None:
        for error in (
            SchemaValidationError([]),
            InvalidArgumentError("a", "b"),
            UnsupportedUnitError("x", "distance"),
            AsyncValidationFailure("m"),
        ):
            assert isinstance(error, PeashootError)
