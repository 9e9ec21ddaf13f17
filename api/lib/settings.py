"""
Runtime settings for the Argus members API

All configuration comes from environment variables (optionally a local .env
file). Settings are read per invocation, never cached at module level.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ingestion.lib.congress_api_client import (
    DEFAULT_API_BASE_URL,
    DEFAULT_MAX_PAGES,
    DEFAULT_TIMEOUT_SECONDS,
)

# Load environment variables from .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class Settings:
    congress_api_key: Optional[str]
    congress_api_base_url: str = DEFAULT_API_BASE_URL
    congress_api_timeout: float = DEFAULT_TIMEOUT_SECONDS
    congress_api_max_pages: int = DEFAULT_MAX_PAGES
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    def require_api_key(self) -> str:
        """Return the Congress.gov API key or fail before any network call."""
        if not self.congress_api_key:
            raise ConfigurationError(
                "CONGRESS_API_KEY is not set; the member directory cannot reach Congress.gov"
            )
        return self.congress_api_key


def load_settings() -> Settings:
    """Read Settings from the environment."""
    return Settings(
        congress_api_key=os.environ.get('CONGRESS_API_KEY') or None,
        congress_api_base_url=os.environ.get('CONGRESS_API_BASE_URL', DEFAULT_API_BASE_URL),
        congress_api_timeout=_env_number('CONGRESS_API_TIMEOUT', DEFAULT_TIMEOUT_SECONDS, float),
        congress_api_max_pages=_env_number('CONGRESS_API_MAX_PAGES', DEFAULT_MAX_PAGES, int),
        environment=os.environ.get('ENVIRONMENT', 'development'),
        log_level=_env_log_level('LOG_LEVEL', 'INFO'),
    )


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level
