"""Custom exceptions and RFC 7807 Problem Detail error handlers."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from console.common.constants import LOGIN_ENDPOINT
from console.config import settings

BASE_ERROR_URI = "https://oa-console.local/errors"

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
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        self.errors = errors
        super().__init__(detail)


class BackendHTTPError(AppException):
    """502 — the REST backend answered with a non-2xx status."""

    def __init__(self, status: int, reason: str, body: str = "") -> None:
        self.upstream_status = status
        self.body = body
        detail = f"Request failed: {status} {reason}".rstrip()
        if body:
            detail = f"{detail} - {body}"
        super().__init__(
            status_code=502,
            error_type="backend-http-error",
            title="Backend Request Failed",
            detail=detail,
            errors={"upstreamStatus": status},
        )


class ApiResultError(AppException):
    """502 — the backend envelope carried a code outside the success set."""

    def __init__(self, message: str, code: Any = None) -> None:
        self.code = code
        super().__init__(
            status_code=502,
            error_type="api-result-error",
            title="Backend Returned An Error",
            detail=message,
            errors={"code": code} if code is not None else None,
        )


class BackendUnavailable(AppException):
    """503 — the backend could not be reached."""

    def __init__(self, detail: str = "The backend service is unreachable.") -> None:
        super().__init__(
            status_code=503,
            error_type="backend-unavailable",
            title="Backend Unavailable",
            detail=detail,
        )


class AuthenticationRequired(AppException):
    """401 — no session, or the backend rejected the session (401/403)."""

    def __init__(
        self,
        detail: str = "Authentication required.",
        upstream_status: Optional[int] = None,
    ) -> None:
        self.upstream_status = upstream_status
        super().__init__(
            status_code=401,
            error_type="authentication-required",
            title="Authentication Required",
            detail=detail,
        )


class ForbiddenException(AppException):
    """403 — insufficient permissions."""

    def __init__(
        self,
        detail: str = "You do not have permission to perform this action.",
    ) -> None:
        super().__init__(
            status_code=403,
            error_type="forbidden",
            title="Forbidden",
            detail=detail,
        )


class ChatConfigurationError(AppException):
    """503 — chat completion credentials are not configured."""

    def __init__(
        self,
        detail: str = "Chat API key is not configured; set CHAT_API_KEY.",
    ) -> None:
        super().__init__(
            status_code=503,
            error_type="chat-not-configured",
            title="Chat Not Configured",
            detail=detail,
        )


class ChatUpstreamError(AppException):
    """502 — the chat completion endpoint failed or answered malformed JSON."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=502,
            error_type="chat-upstream-error",
            title="Chat Request Failed",
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
    return body


# ── FastAPI handlers ────────────────────────────────────────────────

async def _handle_app_exception(
    request: Request,
    exc: AppException,
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_build_problem_detail(exc, request),
        media_type="application/problem+json",
    )


async def _handle_authentication_required(
    request: Request,
    exc: AuthenticationRequired,
):
    # On the login route or the login call itself: report instead of redirecting
    if request.url.path in (settings.LOGIN_PATH, LOGIN_ENDPOINT):
        return await _handle_app_exception(request, exc)
    logger.info("Redirecting %s to %s: %s", request.url.path, settings.LOGIN_PATH, exc.detail)
    return RedirectResponse(url=settings.LOGIN_PATH, status_code=303)


async def _handle_backend_shape_error(
    request: Request,
    exc: ValidationError,
) -> JSONResponse:
    # Request bodies fail as RequestValidationError; a bare ValidationError
    # comes from parsing a backend response into a DTO.
    logger.error("Unexpected backend response shape on %s: %s", request.url.path, exc)
    return await _handle_app_exception(
        request, ApiResultError("Backend returned an unexpected response shape"),
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
    app.add_exception_handler(AuthenticationRequired, _handle_authentication_required)  # type: ignore[arg-type]
    app.add_exception_handler(AppException, _handle_app_exception)          # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, _handle_backend_shape_error)  # type: ignore[arg-type]
