"""
Booking endpoints for API v1.

Authenticated users book a maid and follow their bookings.  Users see
and update only their own bookings; administrators see and update all
of them.  Status changes are limited to ``pending``, ``confirmed``,
``completed`` and ``cancelled``; any other value is rejected with 400
before the booking is looked up.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Path, status

from maid_easy_api.app.core.errors import NotFoundError
from maid_easy_api.app.core.security import ensure_allowed, get_current_session, is_allowed
from maid_easy_api.app.core.sessions import Session
from maid_easy_api.app.core.store import MemoryStore, get_store
from maid_easy_api.app.schemas.booking import Booking, BookingCreate, BookingStatusUpdate
from maid_easy_api.app.schemas.common import envelope


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_owned_booking(store: MemoryStore, session: Session, booking_id: int, action: str) -> Booking:
    """Return the booking if ``session`` may access it.

    Missing bookings give 404; bookings of other users give 403 unless
    the session belongs to an administrator.
    """
    booking = store.get_booking(booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")
    ensure_allowed(
        session,
        owner_id=booking.user_id,
        message=f"Insufficient permissions to {action} this booking",
    )
    return booking


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    store: MemoryStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> Dict[str, Any]:
    """Book a maid for the current user.

    The booking starts as ``pending``.  Returns 404 if the maid does
    not exist.
    """
    if store.get_maid(booking.maid_id) is None:
        raise NotFoundError("Maid not found")
    created = store.create_booking(session.user_id, booking)
    logger.info("User %s booked maid %s (booking %s)", session.user_id, created.maid_id, created.id)
    return envelope("Booking created successfully", created)


@router.get("")
async def list_bookings(
    store: MemoryStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> Dict[str, Any]:
    """List every booking for administrators, own bookings otherwise."""
    if is_allowed(session):
        bookings = store.list_bookings()
    else:
        bookings = store.list_bookings_by_user(session.user_id)
    return envelope("Bookings retrieved", bookings)


@router.get("/{booking_id}")
async def get_booking(
    booking_id: int = Path(..., description="ID of the booking"),
    store: MemoryStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> Dict[str, Any]:
    booking = _get_owned_booking(store, session, booking_id, "view")
    return envelope("Booking retrieved", booking)


@router.patch("/{booking_id}/status")
async def update_booking_status(
    body: BookingStatusUpdate,
    booking_id: int = Path(..., description="ID of the booking"),
    store: MemoryStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> Dict[str, Any]:
    """Change the status of a booking (owner or administrator)."""
    _get_owned_booking(store, session, booking_id, "update")
    updated = store.update_booking_status(booking_id, body.status)
    logger.info("User %s set booking %s to %s", session.user_id, booking_id, body.status.value)
    return envelope("Booking status updated", updated)
