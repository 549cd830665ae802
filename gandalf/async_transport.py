"""
Async HTTP Transport for the Gandalf client.

Same request contract as HTTPTransport, using the httpx async client.
Task cancellation is never caught: asyncio.CancelledError reaches the caller.
"""

import time
from typing import Any

import httpx

from gandalf.exceptions import (
    ConfigurationError,
    GandalfConnectionError,
    HTTPError,
)
from gandalf.logging import log_http_request, log_http_response
from gandalf.transport import JSON_CONTENT_TYPE, format_body


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for the Gandalf API.

    Handles:
    - Joining request paths with the configured endpoint
    - Request body formatting (text, JSON, null)
    - Status code checking, with the response body as error reason
    """

    def __init__(
        self,
        endpoint: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            endpoint: Base URL of the Gandalf server (e.g., "http://localhost:8000")
            http_client: httpx async client to send requests with. One is
                created, and owned by the transport, when omitted.
            timeout: Request timeout in seconds for the created client
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx async client."""
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if the transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL of a path relative to the endpoint."""
        return self.endpoint.rstrip("/") + path

    async def do_request(
        self,
        method: str,
        path: str,
        body: str | None = None,
    ) -> httpx.Response:
        """
        Send a request and return the raw response.

        Args:
            method: HTTP method
            path: API path (e.g., "/repository")
            body: Request body text (optional)

        Returns:
            The httpx response

        Raises:
            ConfigurationError: If the endpoint is not a usable URL
            GandalfConnectionError: If the server cannot be reached
        """
        url = self.url_for(path)
        headers: dict[str, str] = {}
        content = None
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            content = body.encode("utf-8")

        log_http_request(method, url, body)
        started = time.monotonic()

        try:
            response = await self._client.request(
                method, url, content=content, headers=headers
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise ConfigurationError(
                f"invalid Gandalf endpoint {self.endpoint!r}: {e}"
            ) from e
        except httpx.RequestError as e:
            raise GandalfConnectionError(self.endpoint, str(e)) from e

        log_http_response(
            response.status_code, url, (time.monotonic() - started) * 1000
        )
        return response

    async def post(self, path: str, body: Any = None) -> None:
        """POST a body, expecting HTTP 200."""
        response = await self.do_request("POST", path, format_body(body))
        self._check_status(response)

    async def put(self, path: str, body: str) -> None:
        """PUT a text body verbatim, expecting HTTP 200."""
        response = await self.do_request("PUT", path, body)
        self._check_status(response)

    async def delete(self, path: str, body: Any = None) -> None:
        """DELETE with a body (null when omitted), expecting HTTP 200."""
        response = await self.do_request("DELETE", path, format_body(body))
        self._check_status(response)

    async def get(self, path: str) -> bytes:
        """GET a path, expecting HTTP 200, and return the raw body."""
        response = await self.do_request("GET", path)
        self._check_status(response)
        return response.content

    def _check_status(self, response: httpx.Response) -> None:
        if response.status_code != 200:
            raise HTTPError(response.status_code, response.text)
