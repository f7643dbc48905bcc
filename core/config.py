# =============================================================================
# core/config.py  —  Process configuration
# =============================================================================
#
# Two values, read once at startup and never again:
#
#   ROBINHOOD_API_KEY   (required)  sent as the x-api-key header
#   ROBINHOOD_API_URL   (optional)  base URL of the analytics API gateway
#
# Handlers never read the environment.  The Settings object is handed to
# the HTTP client constructor and that's the only place it is used.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import ConfigurationError

API_KEY_ENV = "ROBINHOOD_API_KEY"
API_URL_ENV = "ROBINHOOD_API_URL"
DEFAULT_API_URL = "https://6x8wun8r7i.execute-api.us-east-2.amazonaws.com/prod"


@dataclass(frozen=True)
class Settings:
    """Immutable connection settings for the analytics API."""

    api_key: str
    base_url: str = DEFAULT_API_URL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read Settings from the environment.

    Blank values count as missing.  Raises ConfigurationError when the API
    key is absent.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

    base_url = (env.get(API_URL_ENV) or "").strip() or DEFAULT_API_URL
    return Settings(api_key=api_key, base_url=base_url)
