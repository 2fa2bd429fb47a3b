"""Pydantic Settings for the CMS client.

All environment variables use the CMS_ prefix.
Example: CMS_API_BASE_URL=https://api.example.org, CMS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

BUNDLED_ENDPOINTS_PATH = str(Path(__file__).with_name("endpoints.yaml"))


class CMSSettings(BaseSettings):
    """CMS client configuration validated from environment variables."""

    # Backend
    api_base_url: str = "http://localhost:8080"
    request_timeout_seconds: float = Field(default=10.0, gt=0)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Session persistence; None keeps the session in memory only
    session_path: str | None = None

    # Endpoint catalogue
    endpoints_path: str = BUNDLED_ENDPOINTS_PATH

    model_config = {"env_prefix": "CMS_"}
