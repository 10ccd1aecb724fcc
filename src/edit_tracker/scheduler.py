"""Periodic sweep that closes every open activity span."""

from __future__ import annotations

import logging
import threading

from .aggregator import Aggregator
from .config import TrackerSettings

logger = logging.getLogger(__name__)


class FlushScheduler(threading.Thread):
    """Daemon thread calling :meth:`Aggregator.flush_all` every ``flush_interval``.

    The sweep does not look at span age: every tick closes everything that is
    open, so continuous activity on one file is reported in interval-sized
    chunks. Tests drive :meth:`tick` directly instead of starting the thread.
    """

    def __init__(self, aggregator: Aggregator, settings: TrackerSettings) -> None:
        super().__init__(name="edit-tracker-flush", daemon=True)
        self._aggregator = aggregator
        self._interval = settings.flush_interval.total_seconds()
        self._halt = threading.Event()

    def run(self) -> None:
        logger.info("Flush scheduler started; interval %.0fs.", self._interval)
        while not self._halt.wait(self._interval):
            try:
                self.tick()
            except Exception:
                logger.exception("Flush tick failed.")
        logger.info("Flush scheduler stopped.")

    def tick(self) -> int:
        return len(self._aggregator.flush_all())

    def stop(self, timeout: float = 10.0) -> None:
        self._halt.set()
        if self.is_alive():
            self.join(timeout=timeout)
