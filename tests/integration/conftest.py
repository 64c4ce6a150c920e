"""Fixtures for API integration tests."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from compensation_engine.api.app import create_app
from compensation_engine.calculators.catalog import load_catalog
from compensation_engine.calculators.validation import CompensationRules


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app(catalog=load_catalog(), rules=CompensationRules())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
