"""Collects the rooms that are currently live on the media server."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from room_worker.domain.models import MediaType, RoomSnapshot

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from room_worker.domain.ports import RoomListingRepository

MediaTypeClassifier = Callable[[str], MediaType]


def classify_audio_only(room_name: str) -> MediaType:  # noqa: ARG001
    """Default classifier: every room is treated as audio only."""
    return MediaType.AUDIO_ONLY


class LiveRoomCollector:
    """Builds an ordered set of room snapshots from the room listing."""

    def __init__(
        self,
        room_repository: "RoomListingRepository",
        classifier: MediaTypeClassifier | None = None,
    ) -> None:
        """Initialize with a room listing repository and an optional media type classifier."""
        self._room_repository = room_repository
        self._classify = classifier or classify_audio_only

    async def collect_live_rooms(self) -> list[RoomSnapshot]:
        """Return live rooms sorted by participant count, largest first.

        Ties are ordered by room name. If the listing reports the same room name
        more than once, the entry with the most participants is kept.

        Raises CollectorUnavailableError if the listing fails.
        """
        listed = await self._room_repository.list_rooms()

        by_name: dict[str, RoomSnapshot] = {}
        for name, participant_count in listed:
            snapshot = RoomSnapshot(
                name=name,
                participant_count=participant_count,
                media_type=self._classify(name),
            )
            existing = by_name.get(name)
            if existing is not None:
                logger.warning(
                    f"Room {name} listed more than once "
                    f"({existing.participant_count} and {participant_count} participants)"
                )
                if existing.participant_count >= participant_count:
                    continue
            by_name[name] = snapshot

        rooms = sorted(by_name.values(), key=lambda r: (-r.participant_count, r.name))
        for room in rooms:
            logger.info(f"Room: {room.name}, Participants: {room.participant_count}")
        return rooms
