"""
Pydantic models for service bookings.

A booking ties the authenticated customer to a maid for a given date
and time.  Bookings start as ``pending``; afterwards only the status
changes, and only to one of the four values of ``BookingStatus``.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .common import ApiModel, RecordModel


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingCreate(ApiModel):
    """Schema for creating a booking.

    The customer is taken from the session, never from the payload.
    """

    maid_id: int = Field(..., examples=[1])
    service_type: str = Field(..., min_length=1, examples=["Cleaning"])
    booking_date: str = Field(..., min_length=1, examples=["2025-09-01"])
    booking_time: str = Field(..., min_length=1, examples=["10:00"])
    address: str = Field(..., min_length=5, examples=["45 Park Avenue, Bandra West"])
    notes: Optional[str] = Field(None, examples=["Please bring eco-friendly supplies"])


class BookingStatusUpdate(ApiModel):
    status: BookingStatus


class Booking(RecordModel):
    id: int
    user_id: int
    maid_id: int
    service_type: str
    booking_date: str
    booking_time: str
    address: str
    status: BookingStatus = BookingStatus.PENDING
    notes: Optional[str] = None
    created_at: datetime


def new_booking(booking_id: int, user_id: int, data: BookingCreate, created_at: datetime) -> Booking:
    return Booking(
        id=booking_id,
        user_id=user_id,
        maid_id=data.maid_id,
        service_type=data.service_type,
        booking_date=data.booking_date,
        booking_time=data.booking_time,
        address=data.address,
        status=BookingStatus.PENDING,
        notes=data.notes or None,
        created_at=created_at,
    )
