"""
Main entrypoint for the MaidEasy API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory store and session store and includes the
versioned routers.  ``create_app`` builds and configures an app; an
instance is created at import time as ``app`` so it can be served
with uvicorn, e.g.::

    uvicorn maid_easy_api.app.main:app --reload

Tests call ``create_app`` with their own ``Settings`` (and optionally
their own ``MemoryStore``) to get an isolated application.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.sessions import SessionStore
from .core.store import MemoryStore, init_store


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[MemoryStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment‑derived
        module settings.
    store : Optional[MemoryStore]
        Entity store to serve.  A fresh empty store is created when
        omitted; it is seeded at startup either way.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_store(app.state.store, settings)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else MemoryStore()
    app.state.sessions = SessionStore(ttl_seconds=settings.session_ttl_seconds)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, settings)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get(f"{settings.api_prefix}/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
