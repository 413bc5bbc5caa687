"""Custom exceptions and RFC 7807 Problem Detail error handlers."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

BASE_ERROR_URI = "https://teamdesk.local/errors"

logger = logging.getLogger(__name__)


# ── Exception hierarchy ─────────────────────────────────────────────

class AppException(Exception):
    """Base for all application exceptions → RFC 7807 JSON."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
        errors: Optional[dict[str, Any]] = None,
        location: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        self.errors = errors
        self.location = location
        super().__init__(detail)


class NotFoundException(AppException):
    """404 — entity not found."""

    def __init__(self, entity_type: str, entity_id: Any) -> None:
        super().__init__(
            status_code=404,
            error_type="not-found",
            title=f"{entity_type} Not Found",
            detail=f"{entity_type} with id '{entity_id}' does not exist.",
        )


class InvalidCredentialsException(AppException):
    """401 — no directory entry matches the email/password pair."""

    def __init__(self) -> None:
        super().__init__(
            status_code=401,
            error_type="invalid-credentials",
            title="Login failed",
            detail="Invalid email or password.",
        )


class UnauthenticatedException(AppException):
    """401 — no session; the client should navigate to the login page."""

    def __init__(self, location: str) -> None:
        super().__init__(
            status_code=401,
            error_type="unauthenticated",
            title="Authentication Required",
            detail="Please log in to continue.",
            location=location,
        )


class RoleMismatchException(AppException):
    """403 — the session's role may not enter this area."""

    def __init__(self, role: str, location: str) -> None:
        super().__init__(
            status_code=403,
            error_type="role-mismatch",
            title="Forbidden",
            detail=f"Role '{role}' is not permitted here.",
            location=location,
        )


class ValidationException(AppException):
    """422 — business-logic validation failures."""

    def __init__(
        self,
        errors: dict[str, list[str]],
        *,
        error_type: str = "validation-error",
        title: str = "Validation Error",
        detail: str = "One or more fields failed validation.",
    ) -> None:
        super().__init__(
            status_code=422,
            error_type=error_type,
            title=title,
            detail=detail,
            errors=errors,
        )


class MissingFieldsException(ValidationException):
    """422 — a required field is absent or blank."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            {name: ["This field is required."] for name in fields},
            error_type="missing-fields",
            detail="Please fill in all fields to submit your leave request.",
        )


class InvalidRangeException(ValidationException):
    """422 — a date range whose start falls after its end."""

    def __init__(self) -> None:
        super().__init__(
            {"end_date": ["End date must be on or after start date."]},
            error_type="invalid-range",
            title="Date Error",
            detail="End date must be after start date.",
        )


class IllegalTransitionException(AppException):
    """409 — the entity's current state does not allow the change."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=409,
            error_type="illegal-transition",
            title="Illegal Transition",
            detail=detail,
        )


# ── RFC 7807 builder ────────────────────────────────────────────────

def _build_problem_detail(exc: AppException, request: Request) -> dict[str, Any]:
    body: dict[str, Any] = {
        "type": f"{BASE_ERROR_URI}/{exc.error_type}",
        "title": exc.title,
        "status": exc.status_code,
        "detail": exc.detail,
        "instance": str(request.url.path),
    }
    if exc.errors:
        body["errors"] = exc.errors
    if exc.location:
        body["location"] = exc.location
    return body


# ── FastAPI handlers ────────────────────────────────────────────────

async def _handle_app_exception(
    request: Request,
    exc: AppException,
) -> JSONResponse:
    logger.info(
        "%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.error_type,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_build_problem_detail(exc, request),
        media_type="application/problem+json",
    )


async def _handle_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    field_errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc", ())
        name = (
            ".".join(str(p) for p in loc[1:])
            if len(loc) > 1
            else str(loc[0]) if loc else "unknown"
        )
        field_errors.setdefault(name, []).append(err.get("msg", "Invalid value"))

    return JSONResponse(
        status_code=422,
        content={
            "type": f"{BASE_ERROR_URI}/validation-error",
            "title": "Validation Error",
            "status": 422,
            "detail": "Request validation failed.",
            "instance": str(request.url.path),
            "errors": field_errors,
        },
        media_type="application/problem+json",
    )


# ── Registration helper (called from main.py) ──────────────────────

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""
    app.add_exception_handler(AppException, _handle_app_exception)          # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
