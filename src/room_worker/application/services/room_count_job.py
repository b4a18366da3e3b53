"""One run of the room count report: collect, reconcile, summarize."""

import logging
import time
from typing import TYPE_CHECKING

from room_worker.domain.models import BatchReport

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from room_worker.application.services.listener_count_reconciler import (
        ListenerCountReconciler,
    )
    from room_worker.application.services.live_room_collector import LiveRoomCollector


class RoomCountJob:
    """Runs the collector and the reconciler once and reports totals."""

    def __init__(
        self, collector: "LiveRoomCollector", reconciler: "ListenerCountReconciler"
    ) -> None:
        self._collector = collector
        self._reconciler = reconciler

    async def run(self) -> BatchReport:
        """Run one batch.

        Raises CollectorUnavailableError if the live rooms cannot be listed.
        """
        start = time.monotonic()

        rooms = await self._collector.collect_live_rooms()
        total_participants = sum(room.participant_count for room in rooms)
        logger.info(f"Collected {len(rooms)} live room(s)")

        outcomes = await self._reconciler.reconcile_all(rooms)

        elapsed = time.monotonic() - start
        report = BatchReport(
            outcomes=outcomes,
            total_participants=total_participants,
            elapsed_seconds=elapsed,
        )

        logger.info(f"Total Participant Count: {report.total_participants}")
        if report.has_failures:
            logger.warning(
                f"{len(report.failed_rooms)} room(s) had errors: {', '.join(report.failed_rooms)}"
            )
        logger.info(f"Room counts updated in: {elapsed:.3f}s")
        return report
