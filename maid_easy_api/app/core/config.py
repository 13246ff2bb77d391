"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a production
deployment override at least the administrator password and the
cookie security flag via environment variables.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "MaidEasy API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the versioned router is mounted.  Serverless
    # deployments may need something like ``/.netlify/functions/api``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Sessions live in memory for ``session_ttl_minutes`` after the last
    # request that used them.  The default matches a 24 hour cookie.
    session_ttl_minutes: int = int(os.getenv("SESSION_TTL_MINUTES", str(60 * 24)))
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "maideasy_session")
    session_cookie_secure: bool = _env_flag("SESSION_COOKIE_SECURE", "false")

    # First‑run administrator account.  Created at startup only when no
    # user with ``admin_username`` exists.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@maideasy.com")
    admin_name: str = os.getenv("ADMIN_NAME", "Admin User")

    # Seed the sample maid directory and the default company settings
    # record.  Disable for an empty marketplace.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def session_ttl_seconds(self) -> int:
        return self.session_ttl_minutes * 60


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
