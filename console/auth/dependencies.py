"""Auth dependencies — session/backend injection, login guard, permission gate."""

from __future__ import annotations

from typing import Callable

from fastapi import Depends, Request

from console.auth.service import AuthService
from console.auth.session import SessionStore
from console.common.exceptions import AuthenticationRequired, ForbiddenException
from console.common.transport import BackendClient
from console.users.schemas import User


# ── Per-app objects (created in create_app, see main.py) ───────────

def get_session(request: Request) -> SessionStore:
    return request.app.state.session


def get_backend(request: Request) -> BackendClient:
    return request.app.state.backend


# ── Login guard ─────────────────────────────────────────────────────

async def require_user(
    backend: BackendClient = Depends(get_backend),
    session: SessionStore = Depends(get_session),
) -> User:
    """Return the logged-in user, or send the caller to the login route."""
    user = await AuthService.current_user(backend, session)
    if user is None:
        raise AuthenticationRequired()
    return user


# ── Permission gate ─────────────────────────────────────────────────

def require_permission(*codes: str) -> Callable:
    """Return a dependency that passes when any of *codes* is granted."""

    async def _check(user: User = Depends(require_user)) -> User:
        if not any(AuthService.has_permission(user, code) for code in codes):
            raise ForbiddenException(
                detail=f"Missing permission: one of {list(codes)} is required.",
            )
        return user

    return _check
