"""ServiceResult and ServiceError: the contract every service returns.

Services never let a :class:`~peashoot.domain.errors.PeashootError`
escape; :func:`error_result` translates one into a failed result with
an HTTP-style status and, for schema failures, the full issue list.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from peashoot.domain.errors import (
    AsyncValidationFailure,
    InvalidArgumentError,
    PeashootError,
    SchemaValidationError,
)

BAD_REQUEST = 400
FORBIDDEN = 403
NOT_FOUND = 404
UNPROCESSABLE = 422
INTERNAL_ERROR = 500


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    status: int = INTERNAL_ERROR
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"list_items"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


def status_for(exc: PeashootError) -> int:
    """Map a domain error to the status a caller should report."""
    if isinstance(exc, (SchemaValidationError, InvalidArgumentError, AsyncValidationFailure)):
        return BAD_REQUEST
    return INTERNAL_ERROR


def failure(
    op: str,
    code: str,
    message: str,
    *,
    status: int,
    detail: dict[str, Any] | None = None,
) -> ServiceResult:
    """Build a failed result."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, status=status, detail=detail or {}),
    )


def error_result(op: str, exc: PeashootError) -> ServiceResult:
    """Translate a domain error into a failed result."""
    detail: dict[str, Any] = {}
    if isinstance(exc, SchemaValidationError):
        detail = exc.to_dict()
    elif isinstance(exc, InvalidArgumentError):
        detail = {"argument": exc.name, "reason": exc.reason}
    elif isinstance(exc, AsyncValidationFailure) and exc.original_error is not None:
        detail = {"cause": type(exc.original_error).__name__}
    return failure(op, exc.code, str(exc), status=status_for(exc), detail=detail)
