"""Environment-driven configuration.

Values are read from the process environment each time they are needed,
never cached, so a credential added after startup is picked up by the next
tool call.
"""

from __future__ import annotations

import os

from nomi_mcp.errors import NomiError

API_KEY_ENV = "NOMI_API_KEY"
API_BASE_ENV = "NOMI_API_BASE"

DEFAULT_API_BASE = "https://api.nomi.ai/v1"


def get_api_key() -> str:
    """Return the Nomi API key.

    Raises:
        NomiError: ``ErrorKind.CONFIGURATION`` if the variable is unset or empty.
    """
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise NomiError.configuration(f"{API_KEY_ENV} environment variable not set")
    return api_key


def get_api_base() -> str:
    """Return the API base URL, honouring ``NOMI_API_BASE`` when set."""
    return (os.getenv(API_BASE_ENV) or DEFAULT_API_BASE).rstrip("/")
