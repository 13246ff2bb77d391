"""
Maid directory endpoints for API v1.

Anyone may register as a service provider or browse the directory.
City and locality filters are case‑insensitive exact matches.
Administrators approve or suspend providers by toggling availability
and can see the bookings made for a provider.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Path, status

from maid_easy_api.app.core.errors import ConflictError, NotFoundError
from maid_easy_api.app.core.security import require_roles
from maid_easy_api.app.core.sessions import Session
from maid_easy_api.app.core.store import MemoryStore, get_store
from maid_easy_api.app.schemas.common import envelope
from maid_easy_api.app.schemas.maid import Maid, MaidAvailabilityUpdate, MaidCreate
from maid_easy_api.app.schemas.user import UserRole


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_maid_or_404(store: MemoryStore, maid_id: int) -> Maid:
    maid = store.get_maid(maid_id)
    if maid is None:
        raise NotFoundError("Maid not found")
    return maid


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_maid(
    maid: MaidCreate,
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    """Register a service provider profile.

    Returns 409 if a provider with the same email already exists.
    Omitted ``services`` are stored as an empty list.
    """
    if store.get_maid_by_email(maid.email):
        raise ConflictError("Email already registered as a maid")
    created = store.create_maid(maid)
    logger.info("Maid %s registered in %s/%s", created.id, created.city, created.locality)
    return envelope("Successfully registered as a maid", created)


@router.get("")
async def list_maids(store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    return envelope("Maids retrieved", store.list_maids())


@router.get("/city/{city}")
async def list_maids_by_city(city: str, store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    return envelope("Maids retrieved", store.list_maids_by_city(city))


@router.get("/locality/{locality}")
async def list_maids_by_locality(locality: str, store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    return envelope("Maids retrieved", store.list_maids_by_locality(locality))


@router.get("/{maid_id}")
async def get_maid(
    maid_id: int = Path(..., description="ID of the maid"),
    store: MemoryStore = Depends(get_store),
) -> Dict[str, Any]:
    return envelope("Maid retrieved", _get_maid_or_404(store, maid_id))


@router.patch("/{maid_id}/availability")
async def update_maid_availability(
    body: MaidAvailabilityUpdate,
    maid_id: int = Path(..., description="ID of the maid"),
    store: MemoryStore = Depends(get_store),
    session: Session = Depends(require_roles(UserRole.ADMIN)),
) -> Dict[str, Any]:
    """Approve (``isAvailable: true``) or suspend a provider.

    Only administrators may change availability.
    """
    _get_maid_or_404(store, maid_id)
    updated = store.update_maid_availability(maid_id, body.is_available)
    logger.info("Admin %s set maid %s availability to %s", session.user_id, maid_id, body.is_available)
    return envelope("Maid availability updated", updated)


@router.get("/{maid_id}/bookings")
async def list_maid_bookings(
    maid_id: int = Path(..., description="ID of the maid"),
    store: MemoryStore = Depends(get_store),
    _admin: Session = Depends(require_roles(UserRole.ADMIN)),
) -> Dict[str, Any]:
    _get_maid_or_404(store, maid_id)
    return envelope("Bookings retrieved", store.list_bookings_by_maid(maid_id))
