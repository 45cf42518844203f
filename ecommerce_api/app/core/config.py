"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, without pulling in ``pydantic_settings``.
Defaults are provided for all fields so the service starts with no
configuration at all; override them via the environment in any real
deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "E-commerce API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite file backing the document store.  Relative
    # paths are resolved against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "ecommerce.db")

    # Upper bound, in seconds, for every document store call.  A call
    # that does not finish in time fails the request with a 500.
    store_timeout: float = float(os.getenv("STORE_TIMEOUT", "5"))

    # When enabled, ``POST /orders`` checks that ``userId`` and
    # ``productId`` point to existing records before persisting.
    validate_references: bool = _env_flag("VALIDATE_REFERENCES")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before this module is imported.
settings = Settings()
