"""Auth service — login, logout, cached current user, permission checks."""

from __future__ import annotations

import logging
from typing import Optional

from console.auth.schemas import BackendLoginResult, LoginRequest
from console.auth.session import SessionStore
from console.common.constants import UserRole
from console.common.exceptions import AppException
from console.common.transport import BackendClient
from console.users.schemas import User
from console.users.service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Session lifecycle on top of :class:`SessionStore`."""

    @staticmethod
    async def login(client: BackendClient, session: SessionStore, body: LoginRequest) -> User:
        """Exchange credentials for a token, persist it, and load the profile."""
        data = await client.post("/api/login", json=body.model_dump(by_alias=True))
        result = BackendLoginResult.model_validate(data)
        session.persist(result.token, result.user_id)
        logger.info("Logged in as user %s", result.user_id)
        return await AuthService.current_user(client, session)

    @staticmethod
    async def logout(client: BackendClient, session: SessionStore) -> None:
        """Best-effort server logout; local state is cleared whatever happens."""
        try:
            if session.is_authenticated:
                await client.post("/api/logout")
        except AppException as e:
            logger.warning("Server logout failed, clearing local session anyway: %s", e.detail)
        finally:
            session.clear()

    @staticmethod
    async def current_user(client: BackendClient, session: SessionStore) -> Optional[User]:
        """Return the cached profile, fetching ``/api/me`` once per login."""
        if not session.is_authenticated:
            return None
        if session.profile is None:
            session.cache_profile(await UserService.get_current_user(client))
        return session.profile

    @staticmethod
    def has_permission(user: Optional[User], permission: str) -> bool:
        """Permission check for *user*.

        Admins hold every permission. Other roles are currently also allowed
        everything; the backend has no per-user permission list to consult.
        """
        if user is None:
            return False
        if user.role == UserRole.admin.value:
            return True
        # TODO: map permission codes per role once /api/me returns granted permissions
        return True
