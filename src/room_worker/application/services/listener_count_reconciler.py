"""Merges listener counts with participant counts and persists them per room."""

import asyncio
import logging
from typing import TYPE_CHECKING

from room_worker.domain.errors import (
    ListenerLookupError,
    PersistenceError,
    RoomNotFoundError,
)
from room_worker.domain.models import ErrorDetails, ReconcileOutcome, RoomRecord, RoomSnapshot

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from room_worker.domain.ports import ListenerCountRepository, RoomStore


class ListenerCountReconciler:
    """Reconciles each live room independently.

    A failed listener lookup or store write only affects the room it happened
    for; the remaining rooms are still processed.
    """

    def __init__(
        self,
        listener_repository: "ListenerCountRepository",
        room_store: "RoomStore",
        max_concurrency: int = 1,
    ) -> None:
        """Initialize the reconciler.

        Args:
            listener_repository: Source of per-room listener counts.
            room_store: Store that receives the merged counts.
            max_concurrency: Maximum number of rooms reconciled at the same time.
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._listener_repository = listener_repository
        self._room_store = room_store
        self._max_concurrency = max_concurrency

    async def _lookup_listener_count(
        self, room: RoomSnapshot
    ) -> tuple[int | None, ErrorDetails | None]:
        try:
            return await self._listener_repository.get_listener_count(room.name), None
        except ListenerLookupError as e:
            logger.error(f"Error fetching listener count for room {room.name}: {e.details}")
            return None, e.details
        except Exception as e:
            logger.exception(f"Unexpected error fetching listener count for room {room.name}")
            return None, ErrorDetails(reason=f"Unexpected error: {e}")

    async def _persist(self, record: RoomRecord) -> ErrorDetails | None:
        try:
            await self._room_store.upsert(record)
        except RoomNotFoundError as e:
            logger.warning(f"Room {record.name} not in store, skipping update")
            return e.details
        except PersistenceError as e:
            logger.error(f"Error updating room {record.name}: {e.details}")
            return e.details
        return None

    async def reconcile(self, room: RoomSnapshot) -> ReconcileOutcome:
        """Look up the listener count for a room and persist the merged record."""
        listener_count, listener_error = await self._lookup_listener_count(room)

        listeners_display = "unknown" if listener_count is None else listener_count
        logger.info(
            f"Updating Room: {room.name}, Participants: {room.participant_count} "
            f"| Listeners {listeners_display}"
        )

        record = RoomRecord(
            name=room.name,
            participant_count=room.participant_count,
            listener_count=listener_count,
        )
        store_error = await self._persist(record)
        if store_error is None:
            logger.debug(f"Updated room {room.name} in store")

        return ReconcileOutcome(
            room=room,
            listener_count=listener_count,
            persisted=store_error is None,
            listener_error=listener_error,
            store_error=store_error,
        )

    async def _reconcile_guarded(
        self, room: RoomSnapshot, semaphore: asyncio.Semaphore
    ) -> ReconcileOutcome:
        async with semaphore:
            try:
                return await self.reconcile(room)
            except Exception as e:
                logger.exception(f"Unexpected error reconciling room {room.name}")
                return ReconcileOutcome(
                    room=room,
                    store_error=ErrorDetails(reason=f"Unexpected error: {e}"),
                )

    async def reconcile_all(self, rooms: list[RoomSnapshot]) -> list[ReconcileOutcome]:
        """Reconcile every room, returning outcomes in the order of ``rooms``."""
        if not rooms:
            return []
        semaphore = asyncio.Semaphore(self._max_concurrency)
        tasks = [
            asyncio.create_task(self._reconcile_guarded(room, semaphore)) for room in rooms
        ]
        return list(await asyncio.gather(*tasks))
