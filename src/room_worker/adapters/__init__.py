"""Adapters layer - external system integrations."""

from room_worker.adapters.config import AppConfig
from room_worker.adapters.emqx_api import EmqxListenerCountRepository
from room_worker.adapters.livekit_api import (
    LivekitEgressRepository,
    LivekitRoomRepository,
)
from room_worker.adapters.storage import SqlAlchemyRoomStore

__all__ = [
    "AppConfig",
    "EmqxListenerCountRepository",
    "LivekitEgressRepository",
    "LivekitRoomRepository",
    "SqlAlchemyRoomStore",
]
