"""Fire-and-forget delivery of records to the external collector command."""

from __future__ import annotations

import logging
import subprocess
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol, Union

from .config import TrackerSettings
from .models import EventRecord, HeartbeatRecord

logger = logging.getLogger(__name__)

Record = Union[EventRecord, HeartbeatRecord]


class Reporter(Protocol):
    """Anything that accepts records without making the caller wait."""

    def submit(self, record: Record) -> None: ...

    def close(self) -> None: ...


class CommandReporter:
    """Runs the collector command for each record on a small worker pool."""

    def __init__(self, settings: TrackerSettings) -> None:
        self.settings = settings
        self._executor = ThreadPoolExecutor(
            max_workers=settings.report_workers,
            thread_name_prefix="edit-tracker-report",
        )

    def submit(self, record: Record) -> None:
        try:
            self._executor.submit(self._run, record)
        except RuntimeError:
            logger.warning("Reporter closed; dropping %s for %s", record.kind, record.entity)

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def _run(self, record: Record) -> bool:
        command = [*self.settings.collector_command, *record.to_args()]
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.settings.report_timeout.total_seconds(),
            )
        except (OSError, subprocess.SubprocessError):
            logger.exception("Failed to report %s for %s", record.kind, record.entity)
            return False

        if completed.returncode != 0:
            logger.error(
                "Collector exited with %d for %s %s: %s",
                completed.returncode,
                record.kind,
                record.entity,
                completed.stderr.strip(),
            )
            return False
        logger.debug("Reported %s for %s", record.kind, record.entity)
        return True


def format_duration(seconds: float) -> str:
    total_seconds = int(round(seconds))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
