"""Reconciliation outcome and batch report domain models."""

from pydantic import BaseModel, ConfigDict

from room_worker.domain.models.error_details import ErrorDetails
from room_worker.domain.models.room_snapshot import RoomSnapshot


class ReconcileOutcome(BaseModel):
    """Result of reconciling a single room."""

    model_config = ConfigDict(frozen=True)

    room: RoomSnapshot
    listener_count: int | None = None
    persisted: bool = False
    listener_error: ErrorDetails | None = None
    store_error: ErrorDetails | None = None

    @property
    def failed(self) -> bool:
        """True if either the listener lookup or the store write failed."""
        return self.listener_error is not None or self.store_error is not None


class BatchReport(BaseModel):
    """Summary of one run over all live rooms."""

    model_config = ConfigDict(frozen=True)

    outcomes: list[ReconcileOutcome]
    total_participants: int
    elapsed_seconds: float = 0.0

    @property
    def persisted_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.persisted)

    @property
    def failed_rooms(self) -> list[str]:
        return [outcome.room.name for outcome in self.outcomes if outcome.failed]

    @property
    def has_failures(self) -> bool:
        return any(outcome.failed for outcome in self.outcomes)
