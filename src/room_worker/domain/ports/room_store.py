"""Room store port."""

from typing import Protocol

from room_worker.domain.models.room_record import RoomRecord


class RoomStore(Protocol):
    """Port for persisting room counts keyed by room name."""

    async def upsert(self, record: RoomRecord) -> None:
        """Insert or update the record for ``record.name``.

        Raises PersistenceError if the write fails.
        """
        ...
