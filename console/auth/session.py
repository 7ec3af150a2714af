"""Auth session store — bearer token, user id, and the cached profile.

The token lives in persisted storage and is read again before every request,
so a clear performed anywhere (including by the transport on a 401/403) is
seen by the next caller. The profile is an in-memory cache of ``/api/me``.
"""

from __future__ import annotations

import logging
from typing import Optional

from console.common.constants import SESSION_KEYS, TOKEN_KEY, USER_ID_KEY
from console.common.storage import FileStorage, MemoryStorage
from console.users.schemas import User

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the console session for one operator."""

    def __init__(self, storage: FileStorage | MemoryStorage) -> None:
        self.storage = storage
        self._profile: Optional[User] = None

    # ── Token ───────────────────────────────────────────────────────

    @property
    def token(self) -> Optional[str]:
        return self.storage.get(TOKEN_KEY) or None

    @property
    def user_id(self) -> Optional[str]:
        return self.storage.get(USER_ID_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def persist(self, token: str, user_id: str) -> None:
        """Store a freshly issued token; the cached profile no longer applies."""
        self.storage.set(TOKEN_KEY, token)
        self.storage.set(USER_ID_KEY, user_id)
        self.invalidate_profile()

    def clear(self) -> None:
        """Drop every session key and the cached profile. Safe to repeat."""
        for key in SESSION_KEYS:
            self.storage.remove(key)
        self._profile = None

    # ── Profile cache ───────────────────────────────────────────────

    @property
    def profile(self) -> Optional[User]:
        # A profile without a token is stale (e.g. cleared by another process)
        if self._profile is not None and not self.is_authenticated:
            self._profile = None
        return self._profile

    def cache_profile(self, user: User) -> None:
        self._profile = user

    def invalidate_profile(self) -> None:
        self._profile = None
