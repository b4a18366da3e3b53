"""Tests for the SQLAlchemy room store using SQLite."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from room_worker.adapters.storage import SqlAlchemyRoomStore
from room_worker.domain.errors import PersistenceError, RoomNotFoundError
from room_worker.domain.models import RoomRecord


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    db_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'rooms.db'}")
    yield db_engine
    await db_engine.dispose()


async def _create_table(store: SqlAlchemyRoomStore, engine: AsyncEngine) -> None:
    async with engine.begin() as connection:
        await connection.run_sync(store.table.metadata.create_all)


async def _rows(store: SqlAlchemyRoomStore, engine: AsyncEngine) -> dict[str, tuple[int, int]]:
    table = store.table
    async with engine.connect() as connection:
        result = await connection.execute(
            select(table.c.id, table.c.participantCount, table.c.listenerCount)
        )
        return {row[0]: (row[1], row[2]) for row in result}


@pytest.mark.asyncio
async def test_upsert_inserts_new_room(engine: AsyncEngine) -> None:
    """Given an empty table, when upserting, then the room row is created."""
    store = SqlAlchemyRoomStore(engine)
    await _create_table(store, engine)

    await store.upsert(RoomRecord(name="lobby", participant_count=3, listener_count=5))

    assert await _rows(store, engine) == {"lobby": (3, 5)}


@pytest.mark.asyncio
async def test_upsert_twice_is_idempotent(engine: AsyncEngine) -> None:
    """Given the same record twice, when upserting, then there is still one unchanged row."""
    store = SqlAlchemyRoomStore(engine)
    await _create_table(store, engine)
    record = RoomRecord(name="lobby", participant_count=3, listener_count=5)

    await store.upsert(record)
    await store.upsert(record)

    assert await _rows(store, engine) == {"lobby": (3, 5)}


@pytest.mark.asyncio
async def test_upsert_overwrites_counts(engine: AsyncEngine) -> None:
    """Given an existing room, when upserting new counts, then both are overwritten."""
    store = SqlAlchemyRoomStore(engine)
    await _create_table(store, engine)

    await store.upsert(RoomRecord(name="lobby", participant_count=3, listener_count=5))
    await store.upsert(RoomRecord(name="lobby", participant_count=8, listener_count=0))

    assert await _rows(store, engine) == {"lobby": (8, 0)}


@pytest.mark.asyncio
async def test_unknown_listener_count_keeps_stored_value(engine: AsyncEngine) -> None:
    """Given an unknown listener count, when upserting, then the stored listener count is kept."""
    store = SqlAlchemyRoomStore(engine)
    await _create_table(store, engine)

    await store.upsert(RoomRecord(name="lobby", participant_count=3, listener_count=5))
    await store.upsert(RoomRecord(name="lobby", participant_count=4, listener_count=None))
    await store.upsert(RoomRecord(name="fresh", participant_count=1, listener_count=None))

    assert await _rows(store, engine) == {"lobby": (4, 5), "fresh": (1, 0)}


@pytest.mark.asyncio
async def test_update_mode_updates_existing_rows(engine: AsyncEngine) -> None:
    """Given update mode and an existing row, when writing, then the row is updated."""
    seeding_store = SqlAlchemyRoomStore(engine)
    await _create_table(seeding_store, engine)
    await seeding_store.upsert(RoomRecord(name="lobby", participant_count=1, listener_count=1))
    store = SqlAlchemyRoomStore(engine, mode="update")

    await store.upsert(RoomRecord(name="lobby", participant_count=6, listener_count=2))

    assert await _rows(store, engine) == {"lobby": (6, 2)}


@pytest.mark.asyncio
async def test_update_mode_rejects_unknown_room(engine: AsyncEngine) -> None:
    """Given update mode and no row, when writing, then RoomNotFoundError is raised."""
    store = SqlAlchemyRoomStore(engine, mode="update")
    await _create_table(store, engine)

    with pytest.raises(RoomNotFoundError):
        await store.upsert(RoomRecord(name="ghost", participant_count=1, listener_count=0))
    assert await _rows(store, engine) == {}


@pytest.mark.asyncio
async def test_database_error_raises_persistence_error(engine: AsyncEngine) -> None:
    """Given a missing table, when writing, then PersistenceError is raised."""
    store = SqlAlchemyRoomStore(engine, table_name="does_not_exist")

    with pytest.raises(PersistenceError) as exc_info:
        await store.upsert(RoomRecord(name="lobby", participant_count=1, listener_count=0))

    assert exc_info.value.room_name == "lobby"
    assert "OperationalError" in exc_info.value.details.reason


@pytest.mark.asyncio
async def test_custom_table_name(engine: AsyncEngine) -> None:
    """Given a custom table name, when writing, then that table is used."""
    store = SqlAlchemyRoomStore(engine, table_name="live_rooms")
    await _create_table(store, engine)

    await store.upsert(RoomRecord(name="lobby", participant_count=2, listener_count=1))

    assert store.table.name == "live_rooms"
    assert await _rows(store, engine) == {"lobby": (2, 1)}


def test_invalid_mode_is_rejected() -> None:
    """Given an unknown mode, when creating the store, then ValueError is raised."""
    with pytest.raises(ValueError, match="mode must be"):
        SqlAlchemyRoomStore(engine=None, mode="merge")  # type: ignore[arg-type]
