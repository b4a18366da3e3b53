"""Persisted room record domain model."""

from pydantic import BaseModel, ConfigDict, Field


class RoomRecord(BaseModel):
    """Counts written to the room store, keyed by room name.

    A ``listener_count`` of ``None`` means the lookup failed and the stored
    listener count is left as it is.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    participant_count: int = Field(ge=0)
    listener_count: int | None = Field(default=None, ge=0)
