"""LiveKit room listing repository adapter."""

import logging
from typing import TYPE_CHECKING

from livekit import api

from room_worker.domain.errors import CollectorUnavailableError
from room_worker.domain.ports.room_listing_repository import RoomListingRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from livekit.api import LiveKitAPI


class LivekitRoomRepository(RoomListingRepository):
    """Lists active rooms through the LiveKit RoomService."""

    def __init__(self, client: "LiveKitAPI") -> None:
        """Initialize with a LiveKit API client owned by the caller."""
        self._client = client

    async def list_rooms(self) -> list[tuple[str, int]]:
        """Return ``(name, num_participants)`` for every active room."""
        try:
            response = await self._client.room.list_rooms(api.ListRoomsRequest())
        except Exception as e:
            raise CollectorUnavailableError(f"Listing LiveKit rooms failed: {e}") from e

        rooms = [(room.name, int(room.num_participants)) for room in response.rooms or []]
        logger.debug(f"LiveKit reported {len(rooms)} active room(s)")
        return rooms
