"""Centralised settings for the CMS article proxy.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass(frozen=True)
class Settings:
    # ------------------------------------------------------------------
    # Upstream CMS
    # ------------------------------------------------------------------
    cms_url: str = field(
        default_factory=lambda: os.environ.get("CMS_URL", "http://localhost:1337")
    )
    cms_api_token: str = field(
        default_factory=lambda: os.environ.get("CMS_API_TOKEN", "")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    # Only the CMS issues tokens today; kept so a local signer can be added.
    jwt_secret: str = field(
        default_factory=lambda: os.environ.get("JWT_SECRET", "")
    )

    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    api_host: str = field(
        default_factory=lambda: os.environ.get("API_HOST", "127.0.0.1")
    )
    api_port: int = field(
        default_factory=lambda: int(os.environ.get("API_PORT", "3000"))
    )

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )
    log_format: str = field(
        default_factory=lambda: os.environ.get("LOG_FORMAT", "text")
    )


# Module-level singleton, import this everywhere:
#   from cmsproxy.config import settings
settings = Settings()
