"""
Authentication endpoints for API v1.

Provide registration, login, logout and the current‑user lookup.  A
successful login or registration opens a server‑side session whose
token is set as an HTTP‑only cookie and also returned in the body so
that non‑browser clients can send it as a bearer token.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status

from maid_easy_api.app.core.config import Settings
from maid_easy_api.app.core.errors import AuthenticationError
from maid_easy_api.app.core.security import get_current_session, get_current_user
from maid_easy_api.app.core.sessions import Session, SessionStore, get_session_store
from maid_easy_api.app.core.store import MemoryStore, get_store
from maid_easy_api.app.schemas.common import envelope
from maid_easy_api.app.schemas.user import User, UserCreate, UserLogin
from maid_easy_api.app.services.auth_service import AuthService


logger = logging.getLogger(__name__)

router = APIRouter()


def _set_session_cookie(response: Response, settings: Settings, token: str) -> None:
    # No max_age: the server-side sliding TTL decides when a session ends.
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    request: Request,
    response: Response,
    store: MemoryStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
) -> Dict[str, Any]:
    """Register a customer account and log it in.

    Returns 409 if the username or the email is already taken.
    """
    created = AuthService.register(store, user)
    session = sessions.create(created)
    _set_session_cookie(response, request.app.state.settings, session.token)
    return envelope("Registration successful", created, token=session.token)


@router.post("/login")
async def login_user(
    credentials: UserLogin,
    request: Request,
    response: Response,
    store: MemoryStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
) -> Dict[str, Any]:
    """Check the credentials and open a session.

    The response carries the user (role included) and the session
    token.  Wrong username or password yields 401 without saying which
    of the two was wrong.
    """
    user = AuthService.authenticate(store, credentials.username, credentials.password)
    if user is None:
        raise AuthenticationError("Invalid username or password")
    session = sessions.create(user)
    _set_session_cookie(response, request.app.state.settings, session.token)
    logger.info("User %s logged in", user.username)
    return envelope("Login successful", user, token=session.token)


@router.post("/logout")
async def logout_user(
    request: Request,
    response: Response,
    session: Session = Depends(get_current_session),
    sessions: SessionStore = Depends(get_session_store),
) -> Dict[str, Any]:
    """Invalidate the current session."""
    sessions.revoke(session.token)
    response.delete_cookie(request.app.state.settings.session_cookie_name)
    logger.info("User %s logged out", session.user_id)
    return envelope("Logged out successfully")


@router.get("/user")
async def read_current_user(user: User = Depends(get_current_user)) -> Dict[str, Any]:
    return envelope("Current user", user)
