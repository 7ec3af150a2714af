"""HTTP transport to the REST backend.

Every backend call goes through :class:`BackendClient`, which

- attaches the session token to the ``Authorization`` header,
- turns non-2xx answers into :class:`BackendHTTPError` (status + truncated body),
- clears the session on 401/403 and raises :class:`AuthenticationRequired`,
- normalizes the two envelope conventions the backend uses into an
  :class:`Envelope` before handing ``data`` back to the services.

Single attempt per call; there is no retry policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

import httpx

from console.auth.session import SessionStore
from console.common.constants import SUCCESS_CODES
from console.common.exceptions import (
    ApiResultError,
    AuthenticationRequired,
    BackendHTTPError,
    BackendUnavailable,
)

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "API returned an error"


# ── Envelope normalization ──────────────────────────────────────────

@dataclass(frozen=True)
class Envelope:
    """A backend response body, tagged with the convention it used.

    ``wrapped`` bodies look like ``{"code", "msg", "data"}``; ``raw`` bodies
    are the payload itself (arrays, paged objects, plain records).
    """

    kind: Literal["wrapped", "raw"]
    data: Any
    code: Optional[int] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == "raw" or self.code in SUCCESS_CODES


def _as_code(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.lstrip("-").isdigit():
        return int(value)
    return None


def normalize_envelope(payload: Any) -> Envelope:
    """Classify *payload* as a wrapped or raw envelope."""
    if isinstance(payload, dict) and "code" in payload and ("msg" in payload or "data" in payload):
        return Envelope(
            kind="wrapped",
            data=payload.get("data"),
            code=_as_code(payload.get("code")),
            message=str(payload.get("msg") or ""),
        )
    return Envelope(kind="raw", data=payload)


def unwrap(envelope: Envelope) -> Any:
    """Return the envelope's data, or raise with the server's message."""
    if not envelope.ok:
        raise ApiResultError(envelope.message or DEFAULT_ERROR_MESSAGE, code=envelope.code)
    return envelope.data


# ── Client ──────────────────────────────────────────────────────────

class BackendClient:
    """Authenticated JSON client bound to one session."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        session: SessionStore,
        *,
        auth_scheme: str = "Bearer",
        error_body_limit: int = 200,
    ) -> None:
        self.http = http
        self.session = session
        self.auth_scheme = auth_scheme
        self.error_body_limit = error_body_limit

    def auth_headers(self) -> Dict[str, str]:
        token = self.session.token
        if not token:
            return {}
        value = f"{self.auth_scheme} {token}" if self.auth_scheme else token
        return {"Authorization": value}

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (``None`` if empty)."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s %s params=%s", method, path, params)

        try:
            response = await self.http.request(
                method,
                path,
                params=params or None,
                json=json,
                headers={"Content-Type": "application/json", **self.auth_headers()},
            )
        except httpx.TransportError as e:
            logger.error("Backend unreachable for %s %s: %s", method, path, e)
            raise BackendUnavailable(f"Backend unreachable: {e}") from e

        if response.is_error:
            body = response.text[: self.error_body_limit]
            if response.status_code in (401, 403):
                logger.warning(
                    "Backend rejected session (%s) on %s %s; clearing session",
                    response.status_code, method, path,
                )
                self.session.clear()
                detail = f"Request failed: {response.status_code} {response.reason_phrase}"
                raise AuthenticationRequired(
                    detail=f"{detail} - {body}" if body else detail,
                    upstream_status=response.status_code,
                )
            logger.error("Backend response (%s) for %s %s: %s", response.status_code, method, path, body)
            raise BackendHTTPError(response.status_code, response.reason_phrase, body)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiResultError("Backend returned a non-JSON response") from e

    async def request_result(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Send one request and return the envelope's ``data``."""
        payload = await self.request_json(method, path, params=params, json=json)
        return unwrap(normalize_envelope(payload))

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request_result("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request_result("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request_result("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request_result("DELETE", path, **kwargs)

    async def aclose(self) -> None:
        await self.http.aclose()


def build_http_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    """Create the shared ``httpx.AsyncClient`` for the backend."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
    )
