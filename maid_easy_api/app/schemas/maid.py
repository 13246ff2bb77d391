"""
Pydantic models for service provider ("maid") profiles.

Profiles are created by self‑registration or by an administrator.
After creation only the availability flag changes, which is how the
dashboard approves or suspends a provider.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import ApiModel, Email, RecordModel


class MaidCreate(ApiModel):
    """Schema for registering a service provider."""

    name: str = Field(..., min_length=2, examples=["Priya Sharma"])
    email: Email = Field(..., examples=["priya.sharma@example.com"])
    phone: str = Field(..., min_length=10, examples=["9876543210"])
    city: str = Field(..., min_length=2, examples=["Mumbai"])
    locality: str = Field(..., min_length=1, examples=["Andheri"])
    address: Optional[str] = Field(None, examples=["123 Main Street, Andheri East"])
    experience: Optional[str] = Field(None, examples=["5 years"])
    # Free‑text service tags, order preserved.
    services: Optional[List[str]] = Field(None, examples=[["Cleaning", "Cooking"]])


class MaidAvailabilityUpdate(ApiModel):
    is_available: bool


class Maid(RecordModel):
    id: int
    name: str
    email: str
    phone: str
    city: str
    locality: str
    address: Optional[str] = None
    experience: Optional[str] = None
    services: List[str] = Field(default_factory=list)
    joined_at: datetime
    is_available: bool = True


def new_maid(maid_id: int, data: MaidCreate, joined_at: datetime) -> Maid:
    """Build the stored profile, filling defaults for omitted fields."""
    return Maid(
        id=maid_id,
        name=data.name,
        email=data.email,
        phone=data.phone,
        city=data.city,
        locality=data.locality,
        address=data.address or None,
        experience=data.experience or None,
        services=list(data.services or []),
        joined_at=joined_at,
        is_available=True,
    )
