"""LiveKit egress repository adapter."""

from typing import TYPE_CHECKING

from livekit import api

from room_worker.domain.ports.egress_repository import EgressRepository

if TYPE_CHECKING:
    from livekit.api import LiveKitAPI


class LivekitEgressRepository(EgressRepository):
    """Inspects egress instances through the LiveKit Egress service."""

    def __init__(self, client: "LiveKitAPI") -> None:
        self._client = client

    async def count_active_egress(self) -> int:
        response = await self._client.egress.list_egress(api.ListEgressRequest(active=True))
        return len(response.items)
