"""EMQX broker adapters."""

from room_worker.adapters.emqx_api.emqx_listener_count_repository import (
    EmqxListenerCountRepository,
)

__all__ = ["EmqxListenerCountRepository"]
