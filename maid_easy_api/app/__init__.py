"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (waitlist, maids, bookings, company settings
and authentication) exposes a router defined in ``api/v1/endpoints``.
Persistence is an in‑memory store created once per application by
``create_app`` and shared with the handlers through ``app.state``.
"""

from .main import app, create_app  # noqa: F401
