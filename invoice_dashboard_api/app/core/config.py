"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
dashboard starts locally without any setup.  In a production
deployment you should at least override ``SECRET_KEY`` and
``DATABASE_URL``.
"""

import os
from dataclasses import dataclass, field
from typing import Tuple


def _split_csv(raw: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Invoice Dashboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path or connection string for the SQLite database.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "invoices.db")

    # Navigation targets.  ``invoices_path`` doubles as the cache key of
    # the invoice list view.
    dashboard_path: str = os.getenv("DASHBOARD_PATH", "/dashboard")
    invoices_path: str = os.getenv("INVOICES_PATH", "/dashboard/invoices")
    sign_in_path: str = os.getenv("SIGN_IN_PATH", "/login")

    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "session")

    # Path prefixes the authorization gate never looks at (API helpers
    # and the generated documentation).
    public_prefixes: Tuple[str, ...] = field(
        default_factory=lambda: _split_csv(
            os.getenv("PUBLIC_PREFIXES", "/api,/docs,/redoc,/openapi.json")
        )
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
