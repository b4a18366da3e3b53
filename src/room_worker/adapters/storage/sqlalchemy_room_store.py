"""Room store adapter on SQLAlchemy's asyncio engine."""

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from room_worker.adapters.storage.tables import build_rooms_table
from room_worker.domain.errors import PersistenceError, RoomNotFoundError
from room_worker.domain.models.error_details import ErrorDetails
from room_worker.domain.ports.room_store import RoomStore

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.ext.asyncio import AsyncEngine
    from sqlalchemy.sql.dml import Insert

    from room_worker.domain.models.room_record import RoomRecord

UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyRoomStore(RoomStore):
    """Writes room counts with one short transaction per room."""

    def __init__(
        self,
        engine: "AsyncEngine",
        table_name: str = "Room",
        mode: str = "upsert",
    ) -> None:
        """Initialize the store.

        Args:
            engine: Async engine owned by the caller.
            table_name: Name of the rooms table.
            mode: ``"upsert"`` inserts missing rooms, ``"update"`` only updates existing rows.
        """
        if mode not in ("upsert", "update"):
            raise ValueError("mode must be either 'upsert' or 'update'")
        self._engine = engine
        self.table: Table = build_rooms_table(table_name)
        self._mode = mode

    @staticmethod
    def _values(record: "RoomRecord") -> dict[str, Any]:
        values: dict[str, Any] = {"participantCount": record.participant_count}
        if record.listener_count is not None:
            values["listenerCount"] = record.listener_count
        return values

    def _upsert_statement(self, record: "RoomRecord") -> "Insert":
        dialect = self._engine.dialect.name
        insert = UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise PersistenceError(
                record.name, ErrorDetails(reason=f"Upsert not supported for dialect {dialect}")
            )
        statement = insert(self.table).values(
            id=record.name,
            participantCount=record.participant_count,
            listenerCount=record.listener_count or 0,
        )
        return statement.on_conflict_do_update(
            index_elements=[self.table.c.id], set_=self._values(record)
        )

    async def upsert(self, record: "RoomRecord") -> None:
        """Write the record, creating the row in upsert mode."""
        try:
            async with self._engine.begin() as connection:
                if self._mode == "upsert":
                    await connection.execute(self._upsert_statement(record))
                    return

                result = await connection.execute(
                    update(self.table)
                    .where(self.table.c.id == record.name)
                    .values(**self._values(record))
                )
                if result.rowcount == 0:
                    raise RoomNotFoundError(record.name)
        except SQLAlchemyError as e:
            raise PersistenceError(
                record.name, ErrorDetails(reason=f"{type(e).__name__}: {e}")
            ) from e
