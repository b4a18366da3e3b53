"""Ports (interfaces) for the ports-and-adapters architecture."""

from room_worker.domain.ports.egress_repository import EgressRepository
from room_worker.domain.ports.listener_count_repository import ListenerCountRepository
from room_worker.domain.ports.room_listing_repository import RoomListingRepository
from room_worker.domain.ports.room_store import RoomStore

__all__ = [
    "EgressRepository",
    "ListenerCountRepository",
    "RoomListingRepository",
    "RoomStore",
]
