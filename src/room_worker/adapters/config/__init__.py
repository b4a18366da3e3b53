"""Configuration adapters."""

from room_worker.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
