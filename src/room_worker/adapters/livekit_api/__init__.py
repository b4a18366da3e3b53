"""LiveKit media server adapters."""

from room_worker.adapters.livekit_api.livekit_egress_repository import LivekitEgressRepository
from room_worker.adapters.livekit_api.livekit_room_repository import LivekitRoomRepository

__all__ = [
    "LivekitEgressRepository",
    "LivekitRoomRepository",
]
