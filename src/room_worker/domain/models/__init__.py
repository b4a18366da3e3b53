"""Domain models for room count reporting."""

from room_worker.domain.models.batch_report import BatchReport, ReconcileOutcome
from room_worker.domain.models.error_details import ErrorDetails
from room_worker.domain.models.room_record import RoomRecord
from room_worker.domain.models.room_snapshot import MediaType, RoomSnapshot

__all__ = [
    "BatchReport",
    "ErrorDetails",
    "MediaType",
    "ReconcileOutcome",
    "RoomRecord",
    "RoomSnapshot",
]
