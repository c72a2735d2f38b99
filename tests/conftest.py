"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from nomi_mcp.client import NomiClient

TEST_API_KEY = "test-nomi-key"
TEST_API_BASE = "https://api.nomi.test/v1"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set NOMI_API_KEY for the duration of a test."""
    monkeypatch.setenv("NOMI_API_KEY", TEST_API_KEY)
    monkeypatch.delenv("NOMI_API_BASE", raising=False)
    return TEST_API_KEY


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure NOMI_API_KEY is unset."""
    monkeypatch.delenv("NOMI_API_KEY", raising=False)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for recording transports returning a fixed response."""

    def _make(
        status_code: int = 200,
        json: object | None = None,
        content: bytes | None = None,
    ) -> RecordingTransport:
        def responder(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content or b"")

        return RecordingTransport(responder)

    return _make


@pytest.fixture
def client_factory() -> Callable[[RecordingTransport], Callable[[str], NomiClient]]:
    """Build a dispatcher client factory bound to a mock transport."""

    def _factory(transport: RecordingTransport) -> Callable[[str], NomiClient]:
        def build(api_key: str) -> NomiClient:
            return NomiClient(api_key, base_url=TEST_API_BASE, transport=transport)

        return build

    return _factory
