"""
Waitlist endpoints for API v1.

Visitors join the pre‑launch waitlist with their name, email and an
optional company.  Each email may join once; a repeated email is a
conflict, not an update.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from maid_easy_api.app.core.errors import ConflictError
from maid_easy_api.app.core.security import require_roles
from maid_easy_api.app.core.store import MemoryStore, get_store
from maid_easy_api.app.schemas.common import envelope
from maid_easy_api.app.schemas.user import UserRole
from maid_easy_api.app.schemas.waitlist import WaitlistCreate


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def join_waitlist(
    entry: WaitlistCreate,
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    if store.get_waitlist_entry_by_email(entry.email):
        raise ConflictError("Email already registered on waitlist")
    created = store.create_waitlist_entry(entry)
    logger.info("Waitlist entry %s added", created.id)
    return envelope("Successfully added to waitlist", created)


@router.get("/count")
async def count_waitlist(store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    """Return the number of waitlist signups.

    ``count`` is also exposed at the top level for clients of the
    landing page, which read it directly.
    """
    count = store.count_waitlist_entries()
    return envelope("Waitlist count", {"count": count}, count=count)


@router.get("")
async def list_waitlist(
    store: MemoryStore = Depends(get_store),
    _admin=Depends(require_roles(UserRole.ADMIN)),
) -> Dict[str, Any]:
    """List all waitlist entries (administrators only)."""
    return envelope("Waitlist entries", store.list_waitlist_entries())
