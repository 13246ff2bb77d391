"""
Company settings endpoints for API v1.

The settings record is public to read and writable by administrators
only.  Saving is an upsert that merges the payload into the existing
record.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from maid_easy_api.app.core.errors import NotFoundError
from maid_easy_api.app.core.security import require_roles
from maid_easy_api.app.core.sessions import Session
from maid_easy_api.app.core.store import MemoryStore, get_store
from maid_easy_api.app.schemas.common import envelope
from maid_easy_api.app.schemas.company_settings import CompanySettingsInput
from maid_easy_api.app.schemas.user import UserRole


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_company_settings(store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
    current = store.get_company_settings()
    if current is None:
        raise NotFoundError("Company settings not found")
    return envelope("Company settings retrieved", current)


@router.post("")
async def upsert_company_settings(
    body: CompanySettingsInput,
    store: MemoryStore = Depends(get_store),
    session: Session = Depends(require_roles(UserRole.ADMIN)),
) -> Dict[str, Any]:
    saved = store.upsert_company_settings(body)
    logger.info("Admin %s updated company settings", session.user_id)
    return envelope("Company settings updated", saved)
