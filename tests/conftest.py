"""Shared fixtures - HTTP is served by httpx.MockTransport, no internet."""

import json

import httpx
import pytest
import structlog

from profetch.config import FetcherConfig

BASE_URL = "https://api.test"
VALID_BODY = {"id": "42", "name": "Ann"}


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging config that may point at a closed capture stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def config() -> FetcherConfig:
    return FetcherConfig(base_url=BASE_URL)


def json_response(status: int = 200, body=VALID_BODY) -> httpx.Response:
    """Build a response with a JSON-encoded body."""
    return httpx.Response(status, content=json.dumps(body).encode())


class RecordingHandler:
    """MockTransport handler that returns a fixed response and keeps requests."""

    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_client():
    """Factory for AsyncClients backed by a RecordingHandler."""
    def _make(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make
