"""Entry point for the MaidEasy API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker or a process manager where you only specify a single Python
file to run.

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables (defaults ``0.0.0.0`` and ``8000``).  All other
configuration is read by ``maid_easy_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from maid_easy_api.app.core.config import settings
from maid_easy_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    # log_config=None keeps uvicorn on the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Stopped")
