import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from socialapp import core
from socialapp.main import app


@pytest.fixture(autouse=True)
def mongo():
    """Fresh in-memory document store for every test."""
    client = AsyncMongoMockClient()
    core.use_client(client)
    yield client
    core.use_client(None)


@pytest_asyncio.fixture
async def make_client():
    """Factory for HTTP clients; each one keeps its own session cookie."""
    clients = []

    def _make():
        ac = AsyncClient(transport=ASGITransport(app=app), base_url='http://test')
        clients.append(ac)
        return ac

    yield _make
    for ac in clients:
        await ac.aclose()
