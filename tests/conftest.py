"""Pytest fixtures and shared test configuration.

Fixtures:
    - echo_transport: httpx transport routed to the in-process echo server
    - async_client: HTTPX client for echo server API tests
    - echo_mock_transport: MockTransport that echoes the posted message
    - base_url: Base URL used for in-process requests
"""

import json
from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from talknative.api import app


@pytest.fixture
def base_url() -> str:
    """Base URL for in-process requests."""
    return "http://test"


@pytest.fixture
def echo_transport() -> ASGITransport:
    """Transport that delivers requests to the echo server app."""
    return ASGITransport(app=app)


@pytest.fixture
async def async_client(
    echo_transport: ASGITransport, base_url: str
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    async with AsyncClient(transport=echo_transport, base_url=base_url) as client:
        yield client


@pytest.fixture
def echo_mock_transport() -> httpx.MockTransport:
    """MockTransport answering every chat request with its own message."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=json.loads(request.content)["message"])

    return httpx.MockTransport(handler)
