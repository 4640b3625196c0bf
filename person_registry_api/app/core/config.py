"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts on port 3000 with CORS open to every origin when no
variables are set.
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Person Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of allowed origins.  ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # When enabled, fields beyond name/age/hobbies in a create or
    # replace payload are stored verbatim on the record.  When disabled
    # such payloads are rejected with 400.
    person_allow_unknown_fields: bool = _env_flag("PERSON_ALLOW_UNKNOWN_FIELDS", "true")

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
