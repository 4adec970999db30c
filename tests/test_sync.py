# pylint: disable=redefined-outer-name
# pylint: disable=unused-argument

from collections.abc import AsyncIterator

import pytest
from app.db.sync import sync_schema
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

USER_COLUMNS = ["user.id", "user.username", "user.password", "user.age"]


@pytest.fixture
async def empty_engine(sqlite_url: str) -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(sqlite_url)
    yield engine
    await engine.dispose()


async def _column_names(engine: AsyncEngine, table: str) -> list[str]:
    async with engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns(table)]
        )


async def _count_users(engine: AsyncEngine) -> int:
    async with engine.connect() as conn:
        return (await conn.execute(text('SELECT COUNT(*) FROM "user"'))).scalar_one()


@pytest.mark.parametrize("mode", ["create", "alter", "force"])
async def test_sync_creates_missing_table(empty_engine: AsyncEngine, mode: str):
    changed = await sync_schema(empty_engine, mode)

    assert changed == USER_COLUMNS
    assert await _column_names(empty_engine, "user") == ["id", "username", "password", "age"]


async def test_create_mode_leaves_existing_table_alone(empty_engine: AsyncEngine):
    await sync_schema(empty_engine, "create")
    assert await sync_schema(empty_engine, "create") == []


async def test_alter_mode_adds_missing_columns(empty_engine: AsyncEngine):
    async with empty_engine.begin() as conn:
        await conn.execute(
            text(
                'CREATE TABLE "user" ('
                "id INTEGER PRIMARY KEY, username VARCHAR(255) NOT NULL UNIQUE)"
            )
        )
        await conn.execute(text("INSERT INTO \"user\" (username) VALUES ('legacy')"))

    changed = await sync_schema(empty_engine, "alter")

    assert changed == ["user.password", "user.age"]
    assert await _column_names(empty_engine, "user") == ["id", "username", "password", "age"]

    # existing rows are kept and new rows pick up the column default
    async with empty_engine.begin() as conn:
        await conn.execute(text("INSERT INTO \"user\" (username) VALUES ('fresh')"))
        rows = (
            await conn.execute(text('SELECT username, age FROM "user" ORDER BY id'))
        ).all()
    assert [tuple(r) for r in rows] == [("legacy", 22), ("fresh", 22)]

    assert await sync_schema(empty_engine, "alter") == []


async def test_force_mode_drops_data(engine: AsyncEngine):
    async with engine.begin() as conn:
        await conn.execute(text("INSERT INTO \"user\" (username) VALUES ('alice')"))
    assert await _count_users(engine) == 1

    await sync_schema(engine, "force")

    assert await _count_users(engine) == 0


async def test_unknown_mode_raises(empty_engine: AsyncEngine):
    with pytest.raises(ValueError, match="Unknown sync mode"):
        await sync_schema(empty_engine, "drop")  # type: ignore[arg-type]


async def test_alter_mode_adds_username_with_unique_rule(empty_engine: AsyncEngine):
    async with empty_engine.begin() as conn:
        await conn.execute(text('CREATE TABLE "user" (id INTEGER PRIMARY KEY, age INTEGER)'))

    changed = await sync_schema(empty_engine, "alter")
    assert changed == ["user.username", "user.password"]

    async with empty_engine.begin() as conn:
        await conn.execute(text("INSERT INTO \"user\" (username) VALUES ('dup')"))

    with pytest.raises(IntegrityError):
        async with empty_engine.begin() as conn:
            await conn.execute(text("INSERT INTO \"user\" (username) VALUES ('dup')"))

    assert await _count_users(empty_engine) == 1
