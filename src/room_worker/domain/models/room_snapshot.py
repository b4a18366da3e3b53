"""Room snapshot domain model."""

from dataclasses import dataclass
from enum import Enum


class MediaType(str, Enum):
    """Kind of content shared in a room."""

    AUDIO_ONLY = "AudioOnly"
    VIDEO = "Video"  # camera
    SCREEN = "Screen"  # screen share


@dataclass(frozen=True)
class RoomSnapshot:
    """A live room as reported by the media server at query time."""

    name: str
    participant_count: int
    media_type: MediaType = MediaType.AUDIO_ONLY

    def __post_init__(self) -> None:
        if self.participant_count < 0:
            raise ValueError(
                f"participant_count must be non-negative, got {self.participant_count} "
                f"for room {self.name!r}"
            )
