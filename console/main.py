"""OA Console — FastAPI Application Factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from console.auth.router import login_router, router as auth_router
from console.auth.session import SessionStore
from console.chat.router import router as chat_router
from console.chat.service import ChatService
from console.common.exceptions import register_exception_handlers
from console.common.log import configure_logging
from console.common.rate_limit import limiter
from console.common.storage import FileStorage
from console.common.transport import BackendClient, build_http_client
from console.config import settings
from console.dashboard.router import router as dashboard_router
from console.departments.router import departments_router, roles_router
from console.meetings.router import router as meetings_router
from console.notifications.router import router as notifications_router
from console.users.router import router as users_router
from console.workflows.router import router as workflows_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    yield
    # Shutdown: release pooled connections
    await app.state.backend.aclose()
    await app.state.chat.http.aclose()


def create_app(
    *,
    session: Optional[SessionStore] = None,
    http: Optional[httpx.AsyncClient] = None,
    chat_http: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The session store and HTTP clients default to the configured ones; tests
    pass their own.
    """
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="OA Console",
        description="Office-automation console over the OA REST backend",
        version="1.0.0",
        docs_url="/api/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/api/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )

    # Session + backend transport + chat collaborator, one set per app
    app.state.session = session or SessionStore(FileStorage(settings.SESSION_FILE))
    app.state.backend = BackendClient(
        http or build_http_client(settings.API_BASE_URL, settings.API_TIMEOUT_SECONDS),
        app.state.session,
        auth_scheme=settings.API_AUTH_SCHEME,
        error_body_limit=settings.ERROR_BODY_LIMIT,
    )
    app.state.chat = ChatService(
        chat_http or httpx.AsyncClient(timeout=settings.CHAT_TIMEOUT_SECONDS),
        api_key=settings.CHAT_API_KEY,
        base_url=settings.CHAT_API_BASE_URL,
        model=settings.CHAT_MODEL,
        history_limit=settings.CHAT_HISTORY_LIMIT,
    )

    # Exception handlers (RFC 7807 + login redirect)
    register_exception_handlers(app)

    # Rate limiting (slowapi)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check (no auth)
    @app.get("/api/v1/health", tags=["system"])
    async def health_check():
        return {
            "status": "healthy",
            "version": "1.0.0",
            "environment": settings.ENVIRONMENT,
            "backend": settings.API_BASE_URL,
        }

    # Register routers
    app.include_router(login_router)
    app.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
    app.include_router(dashboard_router, prefix="/api/v1/dashboard", tags=["dashboard"])
    app.include_router(users_router, prefix="/api/v1/users", tags=["users"])
    app.include_router(departments_router, prefix="/api/v1/departments", tags=["departments"])
    app.include_router(roles_router, prefix="/api/v1/roles", tags=["roles"])
    app.include_router(workflows_router, prefix="/api/v1/workflows", tags=["workflows"])
    app.include_router(meetings_router, prefix="/api/v1/meetings", tags=["meetings"])
    app.include_router(notifications_router, prefix="/api/v1/notifications", tags=["notifications"])
    app.include_router(chat_router, prefix="/api/v1/chat", tags=["chat"])

    return app


app = create_app()
