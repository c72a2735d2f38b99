"""Async client for the Nomi AI REST API.

Each request is a single request/response transaction with three outcomes:
a parsed JSON body, the ``{"success": True}`` marker for 204 responses, or a
``NomiError``. There are no retries and no timeout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from nomi_mcp.config import get_api_base
from nomi_mcp.errors import NomiError
from nomi_mcp.observability.logging import get_logger

log = get_logger(__name__)

NO_CONTENT_RESULT: dict[str, Any] = {"success": True}


@dataclass(frozen=True)
class RemoteCall:
    """One HTTP call against the Nomi API.

    Attributes:
        method: HTTP method ("GET", "POST", "PUT", "DELETE").
        path: Path relative to the API base, starting with "/".
        body: JSON body, or None to send no body at all.
    """

    method: str
    path: str
    body: dict[str, Any] | None = None


class NomiClient:
    """Nomi AI API client.

    The API key is sent verbatim in the ``Authorization`` header; the Nomi
    API does not use a bearer scheme.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Nomi API key.
            base_url: API base URL. Defaults to NOMI_API_BASE or the public API.
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = base_url or get_api_base()
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": api_key},
            timeout=None,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Return the API base URL."""
        return self._base_url

    async def request(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        """Send one request and return the parsed response.

        Args:
            method: HTTP method.
            path: Path relative to the API base.
            body: JSON body. ``Content-Type`` is only sent when a body is given.

        Returns:
            The decoded JSON body, or ``{"success": True}`` for 204 responses.

        Raises:
            NomiError: ``REMOTE`` for non-2xx responses, ``TRANSPORT`` when the
                service cannot be reached or returns an unparseable body.
        """
        log.debug("api_request", method=method, path=path, has_body=body is not None)

        try:
            if body is not None:
                response = await self._client.request(method, path, json=body)
            else:
                response = await self._client.request(method, path)
        except httpx.RequestError as e:
            log.warning("api_unreachable", method=method, path=path, error=str(e))
            raise NomiError.transport(str(e) or type(e).__name__) from e

        if not response.is_success:
            category = _error_category(response)
            log.warning(
                "api_error",
                method=method,
                path=path,
                status=response.status_code,
                category=category,
            )
            raise NomiError.remote(category, response.status_code)

        if response.status_code == 204:
            return dict(NO_CONTENT_RESULT)

        try:
            return response.json()
        except ValueError as e:
            raise NomiError.transport(f"Invalid JSON response: {e}") from e

    async def send(self, call: RemoteCall) -> Any:
        """Execute a prepared ``RemoteCall``."""
        return await self.request(call.method, call.path, call.body)

    async def list_nomis(self) -> Any:
        """List the account's Nomis. Used as a connectivity check."""
        return await self.request("GET", "/nomis")

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> NomiClient:
        """Enter async context."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context and close client."""
        await self.close()


def _error_category(response: httpx.Response) -> str:
    """Extract ``error.type`` from an error body, else the status reason phrase."""
    fallback = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return fallback

    error = data.get("error") if isinstance(data, dict) else None
    category = error.get("type") if isinstance(error, dict) else None
    return str(category) if category else fallback
