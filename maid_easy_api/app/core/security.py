"""
Security helpers for password hashing, sessions and authorization.

Passwords are hashed with scrypt and a random per‑password salt.  The
stored credential has the form ``<hash hex>.<salt>`` and verification
uses a constant‑time comparison.

Requests authenticate with the session token issued at login.  The
token travels in the session cookie set by the login endpoint, or in
an ``Authorization: Bearer <token>`` header for non‑browser clients.
The ``get_current_session`` dependency resolves it; ``require_roles``
and ``ensure_allowed`` apply the authorization policy shared by all
handlers: administrators may act on anything, other users only on
resources they own.
"""

import hashlib
import hmac
import logging
import secrets
from typing import Callable, Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import AuthenticationError, AuthorizationError
from .sessions import Session, SessionStore, get_session_store
from .store import MemoryStore, get_store
from ..schemas.user import User, UserRole


logger = logging.getLogger(__name__)

# scrypt cost parameters: 16 MiB of memory per hash.
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
SCRYPT_DKLEN = 64
SCRYPT_MAXMEM = 64 * 1024 * 1024


def _scrypt(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=SCRYPT_DKLEN,
        maxmem=SCRYPT_MAXMEM,
    )


def hash_password(password: str) -> str:
    """Hash a password using scrypt.

    A 16‑byte random salt (hex encoded) is generated for each password.
    The result contains the derived key in hex and the salt separated
    by a ``.``.

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Hash and salt concatenated with ``.``.
    """
    salt = secrets.token_hex(16)
    return f"{_scrypt(password, salt).hex()}.{salt}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``hash.salt`` string.

    Returns ``False`` for malformed stored values instead of raising.
    """
    hash_hex, sep, salt = hashed_password.rpartition(".")
    if not sep or not hash_hex or not salt:
        return False
    try:
        stored = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    return hmac.compare_digest(_scrypt(plain_password, salt), stored)


bearer = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[str]:
    """Extract the session token from the bearer header or the cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(request.app.state.settings.session_cookie_name)


def get_current_session(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
    store: MemoryStore = Depends(get_store),
) -> Session:
    """Dependency that resolves the authenticated session.

    Raises ``AuthenticationError`` (401) when no token is supplied, the
    session is unknown or expired, or its user no longer exists.
    """
    if not token:
        raise AuthenticationError()
    session = sessions.get(token)
    if session is None:
        raise AuthenticationError("Invalid or expired session")
    user = store.get_user(session.user_id)
    if user is None:
        sessions.revoke(token)
        raise AuthenticationError("User no longer exists")
    # Role changes take effect on the next request.
    session.role = user.role
    return session


def get_current_user(
    session: Session = Depends(get_current_session),
    store: MemoryStore = Depends(get_store),
) -> User:
    return store.get_user(session.user_id)


# ---------------------------------------------------------------------------
# Authorization policy
# ---------------------------------------------------------------------------

def is_allowed(
    session: Session,
    owner_id: Optional[int] = None,
    roles: Iterable[UserRole] = (UserRole.ADMIN,),
) -> bool:
    """Decide whether ``session`` may act on a resource.

    Access is granted when the session's role is one of ``roles``, or
    when ``owner_id`` is given and matches the session's user.
    """
    if session.role in tuple(roles):
        return True
    return owner_id is not None and session.user_id == owner_id


def ensure_allowed(
    session: Session,
    owner_id: Optional[int] = None,
    roles: Iterable[UserRole] = (UserRole.ADMIN,),
    message: Optional[str] = None,
) -> None:
    if not is_allowed(session, owner_id=owner_id, roles=roles):
        logger.info("Denied user %s (role %s)", session.user_id, session.role.value)
        raise AuthorizationError(message)


def require_roles(*roles: UserRole) -> Callable[[Session], Session]:
    """Dependency factory to enforce that the current user has one of the given roles.

    Use in endpoints as ``Depends(require_roles(UserRole.ADMIN))``.
    Unauthenticated requests get 401, authenticated ones without a
    matching role get 403.
    """

    def _role_dependency(session: Session = Depends(get_current_session)) -> Session:
        ensure_allowed(session, roles=roles)
        return session

    return _role_dependency
