"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.api.dependencies import get_storage
from src.api.main import create_app
from src.storage import BACKENDS, create_storage


@pytest.fixture(params=sorted(BACKENDS))
def storage(request):
    """Create an empty store with initial id 1, once per backend."""
    return create_storage(request.param, initial_id=1)


@pytest.fixture
def app(storage):
    """Create test application bound to a fresh store."""
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: storage
    return app


@pytest_asyncio.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
