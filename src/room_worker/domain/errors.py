"""Error taxonomy for the room worker."""

from room_worker.domain.models.error_details import ErrorDetails


class RoomWorkerError(Exception):
    """Base class for all room worker errors."""


class ConfigurationError(RoomWorkerError):
    """Required settings are missing or invalid."""

    def __init__(self, missing: list[str] | None = None, message: str | None = None) -> None:
        self.missing = missing or []
        if message is None:
            message = "Missing required configuration: " + ", ".join(self.missing)
        super().__init__(message)


class CollectorUnavailableError(RoomWorkerError):
    """The room-listing service could not be queried."""


class ListenerLookupError(RoomWorkerError):
    """The listener count for a single room could not be determined."""

    def __init__(self, room_name: str, details: ErrorDetails) -> None:
        self.room_name = room_name
        self.details = details
        super().__init__(f"Listener lookup failed for room {room_name!r}: {details}")


class PersistenceError(RoomWorkerError):
    """Writing a room record to the store failed."""

    def __init__(self, room_name: str, details: ErrorDetails) -> None:
        self.room_name = room_name
        self.details = details
        super().__init__(f"Persisting room {room_name!r} failed: {details}")


class RoomNotFoundError(PersistenceError):
    """Update-only store mode and the room has no row yet."""

    def __init__(self, room_name: str) -> None:
        super().__init__(room_name, ErrorDetails(reason="Room not found in store"))
