"""Relational store adapters."""

from room_worker.adapters.storage.sqlalchemy_room_store import SqlAlchemyRoomStore
from room_worker.adapters.storage.tables import build_rooms_table

__all__ = ["SqlAlchemyRoomStore", "build_rooms_table"]
