"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the API
starts with an empty directory and no upstream when nothing is set.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8111"))

    # Number of names returned by the top earners endpoint.
    top_earners_limit: int = int(os.getenv("TOP_EARNERS_LIMIT", "10"))

    # Base URL of the mock employee server, e.g. ``http://localhost:8112``.
    # When set, the directory is seeded from it at startup.
    upstream_url: str = os.getenv("UPSTREAM_URL", "")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "15"))


# Environment variables must be set before this module is imported.
settings = Settings()
