"""Domain layer - core models, ports and errors."""

from room_worker.domain.errors import (
    CollectorUnavailableError,
    ConfigurationError,
    ListenerLookupError,
    PersistenceError,
    RoomNotFoundError,
    RoomWorkerError,
)
from room_worker.domain.models import (
    BatchReport,
    ErrorDetails,
    MediaType,
    ReconcileOutcome,
    RoomRecord,
    RoomSnapshot,
)
from room_worker.domain.ports import (
    EgressRepository,
    ListenerCountRepository,
    RoomListingRepository,
    RoomStore,
)

__all__ = [
    "BatchReport",
    "CollectorUnavailableError",
    "ConfigurationError",
    "EgressRepository",
    "ErrorDetails",
    "ListenerCountRepository",
    "ListenerLookupError",
    "MediaType",
    "PersistenceError",
    "ReconcileOutcome",
    "RoomListingRepository",
    "RoomNotFoundError",
    "RoomRecord",
    "RoomSnapshot",
    "RoomStore",
    "RoomWorkerError",
]
