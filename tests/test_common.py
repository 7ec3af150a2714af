"""Common layer test suite — problem-detail errors, validation shape,
pagination bounds, config helpers.
"""

from __future__ import annotations

import httpx
import pytest

from console.common.exceptions import BackendHTTPError
from console.config import Settings
from console.meetings.schemas import BackendMeetingRoom
from tests.conftest import fail, ok, paged


# ═════════════════════════════════════════════════════════════════════
# 1. PROBLEM DETAILS
# ═════════════════════════════════════════════════════════════════════


class TestProblemDetails:

    async def test_api_error_shape(self, client, backend, logged_in):
        backend.on("GET", "/api/role/list", fail("Role table locked", code=3))

        resp = await client.get("/api/v1/roles")

        assert resp.status_code == 502
        assert resp.headers["content-type"].startswith("application/problem+json")
        body = resp.json()
        assert body["type"].endswith("/api-result-error")
        assert body["detail"] == "Role table locked"
        assert body["instance"] == "/api/v1/roles"
        assert body["errors"] == {"code": 3}

    async def test_backend_unreachable_is_503(self, app, client, logged_in):
        def _boom(request):
            raise httpx.ConnectError("refused", request=request)

        app.state.backend.http = httpx.AsyncClient(
            transport=httpx.MockTransport(_boom), base_url="http://backend.test",
        )
        try:
            resp = await client.get("/api/v1/auth/me")
        finally:
            await app.state.backend.http.aclose()

        assert resp.status_code == 503
        assert resp.json()["type"].endswith("/backend-unavailable")

    def test_http_error_without_body(self):
        err = BackendHTTPError(404, "Not Found")
        assert err.detail == "Request failed: 404 Not Found"

    async def test_unexpected_backend_shape_is_502(self, client, backend, logged_in):
        backend.on("GET", "/api/meeting-rooms", ok([{"id": 1, "location": "3F"}]))

        resp = await client.get("/api/v1/meetings/rooms")

        assert resp.status_code == 502
        assert resp.headers["content-type"].startswith("application/problem+json")
        body = resp.json()
        assert body["type"].endswith("/api-result-error")
        assert body["detail"] == "Backend returned an unexpected response shape"

    def test_null_fields_fall_back_to_defaults(self):
        room = BackendMeetingRoom.model_validate({"id": 3, "name": "Training Room", "location": None})
        assert room.location == ""
        assert room.capacity == 0


# ═════════════════════════════════════════════════════════════════════
# 2. VALIDATION + PAGINATION
# ═════════════════════════════════════════════════════════════════════


class TestValidation:

    async def test_field_errors_keyed_by_name(self, client, logged_in):
        resp = await client.post("/api/v1/departments", json={"name": ""})

        assert resp.status_code == 422
        body = resp.json()
        assert body["title"] == "Validation Error"
        assert "name" in body["errors"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}])
    async def test_pagination_bounds(self, client, backend, logged_in, params):
        backend.on("GET", "/api/users/list", ok(paged([])))
        resp = await client.get("/api/v1/users", params=params)
        assert resp.status_code == 422
        assert backend.calls("GET", "/api/users/list") == []

    async def test_default_page_size(self, client, backend, logged_in):
        backend.on("GET", "/api/users/list", ok(paged([])))
        await client.get("/api/v1/users")
        params = backend.last("GET", "/api/users/list").url.params
        assert params["page"] == "1"
        assert params["limit"] == "50"


# ═════════════════════════════════════════════════════════════════════
# 3. CONFIG
# ═════════════════════════════════════════════════════════════════════


class TestSettings:

    def test_cors_origins_parsed_from_json(self):
        s = Settings(CORS_ORIGINS='["http://a.test", "http://b.test"]')
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_cors_origins_fallback(self):
        assert Settings(CORS_ORIGINS="not json").cors_origins_list == ["http://localhost:5173"]

    def test_defaults(self):
        s = Settings()
        assert s.API_AUTH_SCHEME == "Bearer"
        assert s.ERROR_BODY_LIMIT == 200
        assert s.LOGIN_PATH == "/login"
