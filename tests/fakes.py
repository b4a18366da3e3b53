"""In-memory implementations of the domain ports for tests."""

from room_worker.domain.errors import (
    CollectorUnavailableError,
    ListenerLookupError,
    PersistenceError,
)
from room_worker.domain.models import ErrorDetails, RoomRecord


class MockRoomListingRepository:
    """Mock room listing repository for testing."""

    def __init__(self, rooms: list[tuple[str, int]], fail: bool = False) -> None:
        """Initialize with the rooms to return, or fail on every call."""
        self.rooms = rooms
        self.fail = fail
        self.calls = 0

    async def list_rooms(self) -> list[tuple[str, int]]:
        self.calls += 1
        if self.fail:
            raise CollectorUnavailableError("room service unreachable")
        return list(self.rooms)


class MockListenerCountRepository:
    """Mock listener count repository for testing."""

    def __init__(
        self, counts: dict[str, int] | None = None, failing: set[str] | None = None
    ) -> None:
        """Initialize with listener counts per room and rooms whose lookup fails.

        Rooms missing from ``counts`` have no subscribers.
        """
        self.counts = counts or {}
        self.failing = failing or set()
        self.requested: list[str] = []

    async def get_listener_count(self, room_name: str) -> int:
        self.requested.append(room_name)
        if room_name in self.failing:
            raise ListenerLookupError(
                room_name, ErrorDetails(status_code=503, reason="Service unavailable")
            )
        return self.counts.get(room_name, 0)


class InMemoryRoomStore:
    """Room store keeping rows in a dict keyed by room name."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.rows: dict[str, dict[str, int]] = {}
        self.failing = failing or set()
        self.writes = 0

    async def upsert(self, record: RoomRecord) -> None:
        if record.name in self.failing:
            raise PersistenceError(record.name, ErrorDetails(reason="disk full"))
        self.writes += 1
        row = self.rows.setdefault(record.name, {"participant_count": 0, "listener_count": 0})
        row["participant_count"] = record.participant_count
        if record.listener_count is not None:
            row["listener_count"] = record.listener_count
