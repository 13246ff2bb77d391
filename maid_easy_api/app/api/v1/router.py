"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, company_settings, maids, waitlist

router = APIRouter()

# Authentication routes sit at the root: /register, /login, /logout, /user.
router.include_router(auth.router, tags=["auth"])
router.include_router(waitlist.router, prefix="/waitlist", tags=["waitlist"])
router.include_router(maids.router, prefix="/maids", tags=["maids"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(company_settings.router, prefix="/company-settings", tags=["company-settings"])
