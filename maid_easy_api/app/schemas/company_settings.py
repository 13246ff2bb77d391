"""
Pydantic models for the platform‑wide company settings record.

There is at most one record (``id`` is always 1).  Saving settings is
an upsert: the first save creates the record and later saves merge the
fields present in the payload into it.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import ApiModel, Email, RecordModel


COMPANY_SETTINGS_ID = 1


class CompanySettingsInput(ApiModel):
    company_name: str = Field(..., min_length=1, examples=["MaidEasy"])
    contact_email: Email = Field(..., examples=["contact@maideasy.com"])
    contact_phone: str = Field(..., min_length=1, examples=["+91 9876543210"])
    address: str = Field(..., min_length=1, examples=["123 Main Street, Mumbai, India"])
    logo: Optional[str] = None
    services_offered: Optional[List[str]] = None
    operating_hours: Optional[str] = None


class CompanySettings(RecordModel):
    id: int = COMPANY_SETTINGS_ID
    company_name: str
    contact_email: str
    contact_phone: str
    address: str
    logo: Optional[str] = None
    services_offered: Optional[List[str]] = None
    operating_hours: Optional[str] = None
    updated_at: datetime


def merge_company_settings(
    current: Optional[CompanySettings],
    data: CompanySettingsInput,
    updated_at: datetime,
) -> CompanySettings:
    """Merge ``data`` into ``current`` (or create the record).

    Only fields present in the payload overwrite stored values, so
    saving the same payload twice yields the same record apart from
    ``updated_at``.
    """
    changes = data.model_dump(exclude_unset=True)
    if current is None:
        return CompanySettings(id=COMPANY_SETTINGS_ID, updated_at=updated_at, **changes)
    return current.model_copy(update={**changes, "updated_at": updated_at})
