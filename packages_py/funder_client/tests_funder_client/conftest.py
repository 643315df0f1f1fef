"""
Shared fixtures for funder_client tests.
"""
import json
from typing import Callable, List
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import unquote

import httpx
import pytest

from funder_client.config import FunderConfig, resolve_config


BASE_URL = "http://localhost:3000"


def decode_form(encoded: str) -> dict:
    """Split on & then =, percent-decode both sides."""
    if not encoded:
        return {}
    pairs = (part.split("=", 1) for part in encoded.split("&"))
    return {unquote(key): unquote(value) for key, value in pairs}


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a response."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_response(status: int, body) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, content=json.dumps(body).encode())


def refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def corrupt_gzip(request: httpx.Request) -> httpx.Response:
    """Claims gzip but the bytes are not, so httpx fails decoding the body."""
    return httpx.Response(
        200,
        headers={"Content-Encoding": "gzip"},
        stream=httpx.ByteStream(b"not-gzip-at-all"),
    )


@pytest.fixture
def funder_config():
    """FunderConfig pointing at the demo backend."""
    return FunderConfig(base_url=BASE_URL)


@pytest.fixture
def resolved_config(funder_config):
    return resolve_config(funder_config)


@pytest.fixture
def mock_httpx_async_client():
    """Mock httpx.AsyncClient for testing."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_httpx_sync_client():
    """Mock httpx.Client for testing."""
    client = MagicMock(spec=httpx.Client)
    client.close = MagicMock()
    return client


@pytest.fixture
def mock_response():
    """Mock httpx.Response for testing."""
    response = MagicMock()
    response.status_code = 200
    response.headers = {"content-type": "application/json"}
    response.text = '{"success": true}'
    return response
