"""Room listing repository port."""

from typing import Protocol


class RoomListingRepository(Protocol):
    """Port for listing the rooms currently active on the media server."""

    async def list_rooms(self) -> list[tuple[str, int]]:
        """Return ``(room_name, participant_count)`` for every active room.

        Raises CollectorUnavailableError if the media server cannot be queried.
        """
        ...
