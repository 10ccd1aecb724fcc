"""Wire the aggregator, reporter and flush scheduler into one runnable service."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .aggregator import Aggregator, Clock, wall_clock
from .config import TrackerSettings
from .editor import Observation, read_observations
from .reporting import CommandReporter, Reporter
from .scheduler import FlushScheduler

logger = logging.getLogger(__name__)


class TrackerService:
    """Feeds editor observations into the aggregator until the input ends."""

    def __init__(
        self,
        settings: TrackerSettings,
        reporter: Optional[Reporter] = None,
        clock: Clock = wall_clock,
    ) -> None:
        self.settings = settings
        self.reporter = reporter or CommandReporter(settings)
        self.aggregator = Aggregator(self.reporter, settings=settings, clock=clock)
        self.scheduler = FlushScheduler(self.aggregator, settings)

    def dispatch(self, observation: Observation) -> None:
        if observation.kind == "save":
            self.aggregator.heartbeat(
                observation.entity,
                observation.language,
                observation.project,
                observation.cursor,
                observation.line_count,
                True,
                observation.timestamp,
            )
            return
        self.aggregator.record(
            observation.entity,
            observation.activity_type,
            observation.language,
            observation.project,
            observation.timestamp,
            line_count=observation.line_count,
            cursor=observation.cursor,
            is_write=observation.is_write,
        )

    def run_until_eof(self, lines: Iterable[str]) -> None:
        logger.info(
            "Starting edit tracker; reporting via %s",
            " ".join(self.settings.collector_command),
        )
        self.scheduler.start()
        try:
            for observation in read_observations(lines):
                try:
                    self.dispatch(observation)
                except Exception:
                    logger.exception("Failed to handle observation for %s", observation.entity)
        except KeyboardInterrupt:
            logger.info("Edit tracker interrupted; flushing open spans.")
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        try:
            self.scheduler.stop()
            self.aggregator.flush_all()
        finally:
            self.reporter.close()
            logger.info("Edit tracker stopped.")
