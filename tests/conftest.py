"""Shared fixtures: Gandalf clients wired to a recording httpx mock transport."""

from typing import Generator

import httpx
import pytest

from gandalf.client import GandalfClient
from gandalf.testing.conftest import (  # noqa: F401
    mock_client,
    mock_client_with_log,
    mock_client_with_repository,
    mock_repository_name,
    mock_user_name,
    sample_commit,
    sample_log,
    sample_public_key,
    sample_repository,
    sample_user,
)

ENDPOINT = "http://gandalf.test:8000"
ERROR_MESSAGE = "Error performing requested operation\n"


class Recorder:
    """httpx mock handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, content: str = "") -> None:
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.content)

    def reply(self, status_code: int = 200, content: str = "") -> "Recorder":
        self.status_code = status_code
        self.content = content
        return self

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def body(self) -> str:
        return self.last.content.decode("utf-8")


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def http_client(recorder: Recorder) -> Generator[httpx.Client, None, None]:
    client = httpx.Client(transport=httpx.MockTransport(recorder))
    yield client
    client.close()


@pytest.fixture
def client(http_client: httpx.Client) -> GandalfClient:
    return GandalfClient(ENDPOINT, http_client=http_client)
