# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument

import os
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path

# the application engine is built at import time; keep it off MySQL in tests
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'users_api_test.db'}",
)

import httpx
import pytest
from app.api.deps import get_db
from app.db.sync import sync_schema
from app.main import start_server
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
async def engine(sqlite_url: str) -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(sqlite_url)
    await sync_schema(engine, "force")
    yield engine
    await engine.dispose()


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncIterator[httpx.AsyncClient]:
    session_factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    start_server.dependency_overrides[get_db] = _get_test_db
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=start_server), base_url="http://test"
    ) as client:
        yield client
    start_server.dependency_overrides.clear()
