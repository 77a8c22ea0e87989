"""Domain error taxonomy.

Every error is raised close to where it is detected and propagates
unmodified to the boundary (service result translation, CLI), which
alone decides how to report it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation: a dotted field path and a readable constraint."""

    path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


class PeashootError(Exception):
    """Base class for all peashoot domain errors."""

    code = "PEASHOOT_ERROR"


class SchemaValidationError(PeashootError):
    """Input does not conform to a declared schema.

    Carries the complete, ordered list of issues so a boundary handler
    can report every problem in a single response.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, issues: list[ValidationIssue], *, schema_name: str | None = None) -> None:
        self.issues = list(issues)
        self.schema_name = schema_name
        target = schema_name or "input"
        noun = "issue" if len(self.issues) == 1 else "issues"
        super().__init__(f"{target} failed validation with {len(self.issues)} {noun}")

    @property
    def paths(self) -> list[str]:
        return [issue.path for issue in self.issues]

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema_name,
            "issues": [issue.to_dict() for issue in self.issues],
        }


class InvalidArgumentError(PeashootError):
    """A required identifier or parameter is missing or malformed."""

    code = "INVALID_ARGUMENT"

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")


class UnsupportedUnitError(PeashootError):
    """A unit conversion received a unit outside its exhaustive set.

    Signals drift between a unit enum and its conversion functions,
    i.e. a programming fault rather than bad client input.
    """

    code = "UNSUPPORTED_UNIT"

    def __init__(self, unit: object, kind: str) -> None:
        self.unit = unit
        self.kind = kind
        super().__init__(f"Unsupported {kind} unit: {unit!r}")


class AsyncValidationFailure(PeashootError):
    """An asynchronous validation step failed for a non-schema reason.

    The underlying failure is kept on ``original_error`` and chained as
    ``__cause__`` by the code that raises this.
    """

    code = "ASYNC_VALIDATION_FAILED"

    def __init__(self, message: str, original_error: BaseException | None = None) -> None:
        self.original_error = original_error
        super().__init__(message)
