"""
Logging setup for the MaidEasy service.

``setup_logging`` is called by ``create_app`` with the application
settings.  It installs one console handler (and a file handler when
``log_file`` is set) on the root logger, tagged so that building
several apps in one process never stacks duplicate handlers.  The
level follows ``log_level``, or ``DEBUG`` when ``debug`` is on.

Access logs from uvicorn and request logs from httpx (the transport
behind ``TestClient``) repeat what the route handlers already log, so
they are held at ``WARNING`` unless the service runs in debug mode.
"""

import logging
from pathlib import Path

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "maid_easy.console"
FILE_HANDLER_NAME = "maid_easy.file"

NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _find_handler(root: logging.Logger, name: str):
    return next((h for h in root.handlers if h.get_name() == name), None)


def setup_logging(settings: Settings) -> logging.Logger:
    """Apply ``settings`` to the root logger and return it.

    Safe to call repeatedly; the latest settings win.
    """
    root = logging.getLogger()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _find_handler(root, CONSOLE_HANDLER_NAME) is None:
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER_NAME)
        console.setFormatter(formatter)
        root.addHandler(console)

    current_file = _find_handler(root, FILE_HANDLER_NAME)
    wanted = str(Path(settings.log_file).resolve()) if settings.log_file else None
    if current_file is not None and current_file.baseFilename != wanted:
        root.removeHandler(current_file)
        current_file.close()
        current_file = None
    if wanted and current_file is None:
        file_handler = logging.FileHandler(wanted, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    noisy_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
    return root
