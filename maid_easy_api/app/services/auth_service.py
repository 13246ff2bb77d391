"""
Business logic for user accounts.

``AuthService`` registers customers, checks credentials and creates
the first‑run administrator.  Handlers own the HTTP side (sessions,
cookies, status codes); this module only talks to the store and the
password hashing helpers.
"""

import logging
from typing import Optional

from maid_easy_api.app.core.config import Settings
from maid_easy_api.app.core.errors import ConflictError
from maid_easy_api.app.core.security import hash_password, verify_password
from maid_easy_api.app.core.store import MemoryStore
from maid_easy_api.app.schemas.user import User, UserCreate, UserRole


logger = logging.getLogger(__name__)


class AuthService:
    """Service for registering and authenticating users."""

    @classmethod
    def register(cls, store: MemoryStore, data: UserCreate) -> User:
        """Create a customer account.

        Raises ``ConflictError`` if the username or the email is
        already taken.  The plaintext password is hashed before it
        reaches the store.
        """
        if store.get_user_by_username(data.username):
            raise ConflictError("Username already exists")
        if store.get_user_by_email(data.email):
            raise ConflictError("Email already registered")
        user = store.create_user(data, hash_password(data.password), role=UserRole.CUSTOMER)
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    @classmethod
    def authenticate(cls, store: MemoryStore, username: str, password: str) -> Optional[User]:
        """Return the user if the credentials match, otherwise ``None``."""
        user = store.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.warning("Failed login for username %s", username)
            return None
        return user

    @classmethod
    def ensure_admin(cls, store: MemoryStore, settings: Settings) -> User:
        """Create the configured administrator unless it already exists."""
        existing = store.get_user_by_username(settings.admin_username)
        if existing is not None:
            return existing
        data = UserCreate(
            username=settings.admin_username,
            password=settings.admin_password,
            email=settings.admin_email,
            name=settings.admin_name,
        )
        admin = store.create_user(data, hash_password(data.password), role=UserRole.ADMIN)
        logger.info("Created administrator account %s", admin.username)
        return admin
