"""
Server‑side session store.

A session maps an opaque random token to the id and role of the user
who logged in.  Sessions expire ``ttl_seconds`` after their last use;
every successful lookup pushes the expiry forward.  Like the entity
store, sessions live in process memory only, so a restart logs every
user out.
"""

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fastapi import Request

from ..schemas.user import User, UserRole


logger = logging.getLogger(__name__)


@dataclass
class Session:
    token: str
    user_id: int
    role: UserRole
    expires_at: float


class SessionStore:
    """In‑memory map of session tokens with a fixed time‑to‑live."""

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, Session] = {}

    def create(self, user: User) -> Session:
        """Open a new session for ``user`` and return it."""
        self.purge_expired()
        token = secrets.token_urlsafe(32)
        session = Session(
            token=token,
            user_id=user.id,
            role=user.role,
            expires_at=self._clock() + self.ttl_seconds,
        )
        self._sessions[token] = session
        return session

    def get(self, token: str) -> Optional[Session]:
        """Return the live session for ``token`` or ``None``.

        Expired sessions are removed on lookup.
        """
        session = self._sessions.get(token)
        if session is None:
            return None
        now = self._clock()
        if session.expires_at <= now:
            del self._sessions[token]
            return None
        session.expires_at = now + self.ttl_seconds
        return session

    def revoke(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [t for t, s in self._sessions.items() if s.expires_at <= now]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug("Purged %d expired sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


def get_session_store(request: Request) -> SessionStore:
    """FastAPI dependency returning the application's session store."""
    return request.app.state.sessions
