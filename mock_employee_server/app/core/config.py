"""
Settings for the mock employee server, read from environment variables.

``MOCK_RANDOM_SEED`` makes the generated employees reproducible; leave
it unset for different data on every start.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_int(value: str) -> Optional[int]:
    return int(value) if value.strip() else None


@dataclass
class Settings:
    """Mock server settings loaded from environment variables."""

    project_name: str = os.getenv("MOCK_PROJECT_NAME", "Mock Employee Server")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    host: str = os.getenv("MOCK_HOST", "0.0.0.0")
    port: int = int(os.getenv("MOCK_PORT", "8112"))

    # How many random employees to generate at startup.
    employee_count: int = int(os.getenv("MOCK_EMPLOYEE_COUNT", "50"))
    random_seed: Optional[int] = _optional_int(os.getenv("MOCK_RANDOM_SEED", ""))


settings = Settings()
