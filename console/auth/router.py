"""Auth router — login, logout, current user, permission checks, login route."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from console.auth.dependencies import get_backend, get_session, require_user
from console.auth.schemas import (
    LoginRequest,
    PermissionCheck,
    PermissionResult,
    SessionResponse,
)
from console.auth.service import AuthService
from console.auth.session import SessionStore
from console.common.constants import LOGIN_ENDPOINT
from console.common.rate_limit import limiter
from console.common.transport import BackendClient
from console.config import settings
from console.users.schemas import User

router = APIRouter(prefix="", tags=["auth"])

# The page unauthenticated callers are sent to; mounted at the app root.
login_router = APIRouter(tags=["auth"])

HOME_PATH = "/api/v1/dashboard"


# ── GET /login — login route ────────────────────────────────────────

@login_router.get(settings.LOGIN_PATH)
async def login_page(session: SessionStore = Depends(get_session)):
    """Where auth failures land. Logged-in callers go straight to the dashboard."""
    if session.is_authenticated:
        return RedirectResponse(url=HOME_PATH, status_code=303)
    return {
        "authenticated": False,
        "detail": "Sign in to continue.",
        "loginEndpoint": LOGIN_ENDPOINT,
    }


# ── POST /login — exchange credentials for a session ───────────────

@router.post("/login")
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    backend: BackendClient = Depends(get_backend),
    session: SessionStore = Depends(get_session),
):
    user = await AuthService.login(backend, session, body)
    return {
        "message": "Logged in successfully",
        "data": SessionResponse(authenticated=True, user_id=session.user_id, user=user),
    }


# ── POST /logout — always clears the local session ─────────────────

@router.post("/logout")
async def logout(
    backend: BackendClient = Depends(get_backend),
    session: SessionStore = Depends(get_session),
):
    await AuthService.logout(backend, session)
    return {"message": "Logged out successfully"}


# ── GET /session — session state without forcing a login ───────────

@router.get("/session", response_model=SessionResponse)
async def session_state(session: SessionStore = Depends(get_session)):
    return SessionResponse(
        authenticated=session.is_authenticated,
        user_id=session.user_id,
        user=session.profile,
    )


# ── GET /me — current user profile ──────────────────────────────────

@router.get("/me", response_model=User)
async def me(user: User = Depends(require_user)):
    return user


# ── POST /permissions — which of the given codes are granted ───────

@router.post("/permissions", response_model=PermissionResult)
async def check_permissions(
    body: PermissionCheck,
    user: User = Depends(require_user),
):
    granted = [code for code in body.codes if AuthService.has_permission(user, code)]
    return PermissionResult(allowed=bool(granted), granted=granted)
