"""
Pydantic models for pre‑launch waitlist signups.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import ApiModel, Email, RecordModel


class WaitlistCreate(ApiModel):
    name: str = Field(..., min_length=2, examples=["Rahul Mehta"])
    email: Email = Field(..., examples=["rahul@example.com"])
    company: Optional[str] = Field(None, examples=["Acme Facilities"])


class WaitlistEntry(RecordModel):
    id: int
    name: str
    email: str
    company: Optional[str] = None
    joined_at: datetime


def new_waitlist_entry(entry_id: int, data: WaitlistCreate, joined_at: datetime) -> WaitlistEntry:
    return WaitlistEntry(
        id=entry_id,
        name=data.name,
        email=data.email,
        company=data.company or None,
        joined_at=joined_at,
    )
