"""
Fixtures for the client-side suites

``api_client`` talks to the real FastAPI app in-process; the other clients use
httpx.MockTransport to simulate an unreachable or failing backend.
"""

import pytest
import pytest_asyncio
import httpx
from typing import AsyncGenerator

from app import app
from client.api import ApiClient
from client.notifications import Notifier


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest_asyncio.fixture
async def api_client(notifier) -> AsyncGenerator[ApiClient, None]:
    """Client wired to the ASGI app"""
    client = ApiClient(base_url="http://testserver", notifier=notifier, transport=httpx.ASGITransport(app=app))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def offline_client(notifier) -> AsyncGenerator[ApiClient, None]:
    """Client whose requests never reach a server"""
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = ApiClient(base_url="http://testserver", notifier=notifier, transport=httpx.MockTransport(refuse))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def broken_server_client(notifier) -> AsyncGenerator[ApiClient, None]:
    """Client whose server answers every request with a bare 503"""
    def unavailable(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="upstream unavailable")

    client = ApiClient(base_url="http://testserver", notifier=notifier, transport=httpx.MockTransport(unavailable))
    yield client
    await client.aclose()
