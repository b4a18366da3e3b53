"""Main entry point: run the room count report once."""

import asyncio
import logging
import sys
from typing import cast

import aiohttp
from livekit import api
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import create_async_engine

from room_worker.adapters.config import AppConfig
from room_worker.adapters.emqx_api import EmqxListenerCountRepository
from room_worker.adapters.livekit_api import LivekitRoomRepository
from room_worker.adapters.storage import SqlAlchemyRoomStore
from room_worker.application.services import (
    ListenerCountReconciler,
    LiveRoomCollector,
    RoomCountJob,
)
from room_worker.domain.errors import CollectorUnavailableError, ConfigurationError
from room_worker.domain.models import BatchReport

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def livekit_client(config: AppConfig) -> api.LiveKitAPI:
    """Create a LiveKit API client. Must be called inside a running event loop."""
    config.require_livekit()
    secret = config.livekit_api_key_secret
    return api.LiveKitAPI(
        url=config.livekit_http_url,
        api_key=config.livekit_api_key,
        api_secret=secret.get_secret_value() if secret else None,
    )


async def run_once(config: AppConfig) -> BatchReport:
    """Run one batch with resources scoped to this call.

    Raises ConfigurationError before any network call if settings are missing,
    and CollectorUnavailableError if the live rooms cannot be listed.
    """
    config.require_all()
    emqx_api_secret = cast(SecretStr, config.emqx_api_secret)

    engine = create_async_engine(cast(str, config.database_url), pool_pre_ping=True)
    try:
        async with aiohttp.ClientSession() as session, livekit_client(config) as lk:
            collector = LiveRoomCollector(LivekitRoomRepository(lk))
            listener_repo = EmqxListenerCountRepository(
                session=session,
                base_url=config.emqx_base_url,
                api_key=cast(str, config.emqx_api_key),
                api_secret=emqx_api_secret.get_secret_value(),
                topic_template=config.listener_topic_template,
                timeout_seconds=config.listener_lookup_timeout_seconds,
            )
            room_store = SqlAlchemyRoomStore(
                engine, table_name=config.rooms_table, mode=config.room_store_mode
            )
            reconciler = ListenerCountReconciler(
                listener_repo, room_store, max_concurrency=config.max_concurrency
            )
            return await RoomCountJob(collector, reconciler).run()
    finally:
        await engine.dispose()


def exit_code_for(report: BatchReport, config: AppConfig) -> int:
    """Map a finished batch to a process exit code."""
    if report.has_failures and config.fail_on_partial_failure:
        return EXIT_FAILURE
    return EXIT_OK


async def main(config: AppConfig | None = None) -> int:
    """Main application entry point. Returns the process exit code."""
    try:
        config = config or AppConfig()
    except ValueError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIGURATION_ERROR

    configure_logging(config.log_level)

    try:
        report = await run_once(config)
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIGURATION_ERROR
    except CollectorUnavailableError as e:
        logger.error(f"Room listing unavailable, nothing was updated: {e}")
        return EXIT_FAILURE

    logger.info(
        f"Updated {report.persisted_count}/{len(report.outcomes)} room(s), "
        f"total participants {report.total_participants}"
    )
    return exit_code_for(report, config)


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
