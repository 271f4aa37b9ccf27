"""
Fixtures for the CRUD endpoint suites
Requests go through httpx against the FastAPI app in-process.
"""

import pytest
import pytest_asyncio
import httpx
from typing import AsyncGenerator, Dict, Any

from app import app


@pytest_asyncio.fixture
async def http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """httpx client bound to the ASGI app"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def user_payload():
    """Factory for user create bodies"""
    def _make(suffix: str = "ada") -> Dict[str, Any]:
        return {"name": suffix.capitalize(), "username": suffix, "email": f"{suffix}@x.com"}
    return _make
