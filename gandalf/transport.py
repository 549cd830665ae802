"""
HTTP Transport for the Gandalf client.

Builds requests against the configured endpoint, formats request bodies and
turns non-200 responses into HTTPError. No retries are attempted.
"""

import json
import time
from typing import Any

import httpx

from gandalf.exceptions import (
    ConfigurationError,
    GandalfConnectionError,
    HTTPError,
    SerializationError,
)
from gandalf.logging import log_http_request, log_http_response

JSON_CONTENT_TYPE = "application/json"


def format_body(body: Any) -> str:
    """
    Format a request body.

    Strings are sent verbatim, None becomes the JSON literal null and
    anything else is encoded as compact JSON.

    Args:
        body: Value to send

    Returns:
        Request body text

    Raises:
        SerializationError: If the value cannot be encoded as JSON
    """
    if isinstance(body, str):
        return body
    if body is None:
        return "null"
    try:
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"unable to encode request body: {e}") from e


class HTTPTransport:
    """
    HTTP transport layer for the Gandalf API.

    Handles:
    - Joining request paths with the configured endpoint
    - Request body formatting (text, JSON, null)
    - Status code checking, with the response body as error reason
    """

    def __init__(
        self,
        endpoint: str,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            endpoint: Base URL of the Gandalf server (e.g., "http://localhost:8000")
            http_client: httpx client to send requests with. One is created,
                and owned by the transport, when omitted.
            timeout: Request timeout in seconds for the created client
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    @property
    def http_client(self) -> httpx.Client:
        """Get the underlying httpx client."""
        return self._client

    def close(self) -> None:
        """Close the HTTP client if the transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL of a path relative to the endpoint."""
        return self.endpoint.rstrip("/") + path

    def do_request(
        self,
        method: str,
        path: str,
        body: str | None = None,
    ) -> httpx.Response:
        """
        Send a request and return the raw response.

        Content-Type is set to JSON only when a body is given. Status codes
        are not interpreted here.

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
            response = self._client.request(
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

    def post(self, path: str, body: Any = None) -> None:
        """
        POST a body, expecting HTTP 200.

        Raises:
            SerializationError: If the body cannot be encoded
            GandalfConnectionError: If the server cannot be reached
            HTTPError: On a non-200 response
        """
        response = self.do_request("POST", path, format_body(body))
        self._check_status(response)

    def put(self, path: str, body: str) -> None:
        """
        PUT a text body verbatim, expecting HTTP 200.

        Raises:
            GandalfConnectionError: If the server cannot be reached
            HTTPError: On a non-200 response
        """
        response = self.do_request("PUT", path, body)
        self._check_status(response)

    def delete(self, path: str, body: Any = None) -> None:
        """
        DELETE with a body (null when omitted), expecting HTTP 200.

        Raises:
            SerializationError: If the body cannot be encoded
            GandalfConnectionError: If the server cannot be reached
            HTTPError: On a non-200 response
        """
        response = self.do_request("DELETE", path, format_body(body))
        self._check_status(response)

    def get(self, path: str) -> bytes:
        """
        GET a path, expecting HTTP 200.

        Returns:
            Raw response body

        Raises:
            GandalfConnectionError: If the server cannot be reached
            HTTPError: On a non-200 response
        """
        response = self.do_request("GET", path)
        self._check_status(response)
        return response.content

    def _check_status(self, response: httpx.Response) -> None:
        if response.status_code != 200:
            raise HTTPError(response.status_code, response.text)
