"""Shared fixtures: both storage backends and an API client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.session import make_engine
from app.main import app
from app.services.storage import DatabaseStorage, MemStorage, get_storage


@pytest.fixture
def mem_storage():
    return MemStorage()


@pytest_asyncio.fixture(params=["memory", "database"])
async def storage(request, tmp_path):
    """Runs the same test against both storage backends."""
    if request.param == "memory":
        yield MemStorage()
    else:
        db = DatabaseStorage(make_engine(f"sqlite+aiosqlite:///{tmp_path / 'roi.db'}"))
        await db.init()
        yield db
        await db.close()


@pytest_asyncio.fixture
async def client(mem_storage):
    app.dependency_overrides[get_storage] = lambda: mem_storage
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
