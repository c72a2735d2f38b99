"""Integration test configuration and fixtures.

Integration tests talk to the live Nomi API and are skipped unless
NOMI_API_KEY is configured.
"""

from __future__ import annotations

import os

import pytest
from dotenv import load_dotenv

# Load .env file at import time so credential checks work
load_dotenv()


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark everything in this directory and skip it without a credential."""
    skip = pytest.mark.skip(reason="NOMI_API_KEY not set")
    for item in items:
        if "integration" in item.nodeid.split("/"):
            item.add_marker(pytest.mark.integration)
            if not os.getenv("NOMI_API_KEY"):
                item.add_marker(skip)
