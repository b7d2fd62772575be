"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Name used as the prefix of alert headers sent back to clients,
    # e.g. ``X-blogApp-alert``.
    application_name: str = os.getenv("APPLICATION_NAME", "blogApp")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "blog.db")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
