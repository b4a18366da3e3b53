"""Egress repository port."""

from typing import Protocol


class EgressRepository(Protocol):
    """Port for inspecting egress instances on the media server."""

    async def count_active_egress(self) -> int:
        """Return the number of active egress instances."""
        ...
