"""Read-only checks against the live Nomi API."""

from __future__ import annotations

import json

import pytest

from nomi_mcp.dispatcher import Dispatcher


@pytest.mark.asyncio
async def test_list_nomis() -> None:
    """list_nomis returns the account's Nomis."""
    response = await Dispatcher().invoke("list_nomis", {})

    assert response.is_error is False, response.text
    assert "nomis" in json.loads(response.text)


@pytest.mark.asyncio
async def test_list_rooms() -> None:
    """list_rooms returns the account's rooms."""
    response = await Dispatcher().invoke("list_rooms", {})

    assert response.is_error is False, response.text
    assert "rooms" in json.loads(response.text)


@pytest.mark.asyncio
async def test_get_unknown_nomi_is_error() -> None:
    """A bogus Nomi id is reported as an error envelope."""
    response = await Dispatcher().invoke(
        "get_nomi", {"nomi_id": "00000000-0000-0000-0000-000000000000"}
    )

    assert response.is_error is True
    assert response.text.startswith("Error: API Error: ")
