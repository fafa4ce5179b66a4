"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file and console logging.  In a
production deployment override these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "College Management System API")
    api_version: str = os.getenv("API_VERSION", "1.0")
    description: str = os.getenv(
        "API_DESCRIPTION",
        "API Documentation for managing lecturers in the college system.",
    )
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path to a log file; an empty value disables the file handler.
    log_file: str = os.getenv("LOG_FILE", "")

    # Contact and server entries published in the OpenAPI document.
    contact_name: str = os.getenv("CONTACT_NAME", "Support Team")
    contact_email: str = os.getenv("CONTACT_EMAIL", "support@college.com")
    server_url: str = os.getenv("SERVER_URL", "http://localhost:8000")
    server_description: str = os.getenv("SERVER_DESCRIPTION", "Local Environment")

    # Which lecturer store to use: ``sqlite`` (durable) or ``memory``
    # (ephemeral, lost on restart).
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite")

    # Path to the SQLite database.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "college.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
