"""Shared test fixtures — fake REST backend, session, app and client.

The OA backend is replaced by an in-process ``httpx.MockTransport`` routing
table, so every test runs without network access.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from console.auth.session import SessionStore
from console.common.constants import TOKEN_KEY, USER_ID_KEY
from console.common.storage import MemoryStorage
from console.common.transport import BackendClient
from console.main import create_app

BACKEND_URL = "http://backend.test"
CHAT_URL = "https://chat.test"
TEST_TOKEN = "tok-123"
TEST_USER_ID = "u-1"


# ── Envelope helpers ────────────────────────────────────────────────

def ok(data: Any = None, code: int = 0, msg: str = "success") -> Dict[str, Any]:
    """Wrapped success envelope ``{code, msg, data}``."""
    return {"code": code, "msg": msg, "data": data}


def fail(msg: str, code: int = 500) -> Dict[str, Any]:
    return {"code": code, "msg": msg, "data": None}


def paged(records: List[Any], total: Optional[int] = None, size: int = 50, current: int = 1) -> Dict[str, Any]:
    return {
        "records": records,
        "total": len(records) if total is None else total,
        "size": size,
        "current": current,
    }


# ── Fake backend ────────────────────────────────────────────────────

Route = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """Routing table of ``(METHOD, path)`` → response, recording every request."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        status: int = 200,
        text: Optional[str] = None,
    ) -> None:
        """Register a canned JSON (or text) response."""

        def _respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=body)

        self.routes[(method.upper(), path)] = _respond

    def on_call(self, method: str, path: str, handler: Route) -> None:
        self.routes[(method.upper(), path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        return route(request)

    # ── Introspection ───────────────────────────────────────────────

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def last(self, method: str, path: str) -> httpx.Request:
        matching = self.calls(method, path)
        assert matching, f"{method} {path} was never called"
        return matching[-1]

    @staticmethod
    def json_body(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def chat_backend() -> FakeBackend:
    return FakeBackend()


# ── Session ─────────────────────────────────────────────────────────

@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def session(storage) -> SessionStore:
    """Empty session (logged out)."""
    return SessionStore(storage)


@pytest.fixture
def logged_in(session, backend) -> SessionStore:
    """Session holding a token, with ``/api/me`` answering for the user."""
    session.storage.set(TOKEN_KEY, TEST_TOKEN)
    session.storage.set(USER_ID_KEY, TEST_USER_ID)
    backend.on("GET", "/api/me", ok({
        "id": TEST_USER_ID,
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
    }))
    return session


# ── Transport ───────────────────────────────────────────────────────

@pytest.fixture
async def http(backend) -> httpx.AsyncClient:
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(backend.handle),
        base_url=BACKEND_URL,
    ) as client:
        yield client


@pytest.fixture
def backend_client(http, session) -> BackendClient:
    return BackendClient(http, session)


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app(backend, chat_backend, session):
    """A fresh app wired to the fake backend and an in-memory session."""
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(backend.handle), base_url=BACKEND_URL,
    )
    chat_client = httpx.AsyncClient(transport=httpx.MockTransport(chat_backend.handle))
    application = create_app(session=session, http=http_client, chat_http=chat_client)
    application.state.chat.base_url = CHAT_URL
    yield application
    await http_client.aclose()
    await chat_client.aclose()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client wired to the test app (redirects are not followed)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    """Reset rate limiter storage between tests to prevent cross-test interference."""
    from console.common.rate_limit import limiter

    limiter.reset()
    yield
