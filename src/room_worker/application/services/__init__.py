"""Application services (use cases) for room count reporting."""

from room_worker.application.services.listener_count_reconciler import (
    ListenerCountReconciler,
)
from room_worker.application.services.live_room_collector import LiveRoomCollector
from room_worker.application.services.room_count_job import RoomCountJob

__all__ = [
    "ListenerCountReconciler",
    "LiveRoomCollector",
    "RoomCountJob",
]
