"""Listener count repository port."""

from typing import Protocol


class ListenerCountRepository(Protocol):
    """Port for counting the listeners subscribed to a room's broker topic."""

    async def get_listener_count(self, room_name: str) -> int:
        """Return the number of listeners for a room.

        Raises ListenerLookupError if the count cannot be determined.
        """
        ...
