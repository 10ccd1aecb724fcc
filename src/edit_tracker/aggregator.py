"""In-memory aggregation of editor activity into spans and heartbeats."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .config import UNKNOWN, TrackerSettings
from .models import ActivitySpan, EventRecord, HeartbeatRecord
from .reporting import Reporter, format_duration

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def wall_clock() -> int:
    return int(time.time())


class Aggregator:
    """Owns the open span per entity and the last line count per entity.

    Span durations are extended against ``last_activity_timestamp``, which is
    shared across all entities: activity on another file in between two
    observations of the same file still shortens the increment.
    """

    def __init__(
        self,
        reporter: Reporter,
        settings: Optional[TrackerSettings] = None,
        clock: Clock = wall_clock,
    ) -> None:
        self.reporter = reporter
        self.settings = settings or TrackerSettings()
        self._clock = clock
        self._lock = threading.Lock()
        self._spans: dict[str, ActivitySpan] = {}
        self._line_counts: dict[str, int] = {}
        self.last_activity_timestamp = clock()

    def record(
        self,
        entity: str,
        activity_type: str,
        language: str = UNKNOWN,
        project: str = UNKNOWN,
        now: Optional[int] = None,
        *,
        line_count: int = 0,
        cursor: int = 0,
        is_write: bool = False,
    ) -> None:
        """Open, extend or replace the span for ``entity`` and emit a heartbeat."""
        entity = entity or UNKNOWN
        language = language or UNKNOWN
        project = project or UNKNOWN
        now = self._clock() if now is None else now

        closed: Optional[EventRecord] = None
        with self._lock:
            span = self._spans.get(entity)
            if span and span.activity_type == activity_type:
                span.accumulated_duration += now - self.last_activity_timestamp
            else:
                if span:
                    closed = self._close_locked(entity, now)
                span = ActivitySpan(
                    entity=entity,
                    activity_type=activity_type,
                    opened_at=now,
                    language=language,
                    project=project,
                )
                self._spans[entity] = span
            self.last_activity_timestamp = now
            duration = span.accumulated_duration

        if closed:
            self._submit(closed)
        logger.info(
            "Updated event: %s | File: %s | Language: %s | Project: %s | Duration: %s",
            activity_type,
            entity,
            language,
            project,
            format_duration(duration),
        )
        self.heartbeat(entity, language, project, cursor, line_count, is_write, now)

    def close_and_report(self, entity: str) -> Optional[EventRecord]:
        """Remove the open span for ``entity`` and report it, if there is one."""
        with self._lock:
            record = self._close_locked(entity, self._clock())
        if record:
            self._submit(record)
        return record

    def flush_all(self) -> list[EventRecord]:
        """Close and report every open span, however recently it was touched."""
        with self._lock:
            now = self._clock()
            records = [self._close_locked(entity, now) for entity in list(self._spans)]
        for record in records:
            self._submit(record)
        if records:
            logger.debug("Flushed %d open spans.", len(records))
        return records

    def heartbeat(
        self,
        entity: str,
        language: str = UNKNOWN,
        project: str = UNKNOWN,
        cursor: int = 0,
        line_count: int = 0,
        is_write: bool = False,
        now: Optional[int] = None,
    ) -> HeartbeatRecord:
        """Emit a heartbeat carrying the line delta since the last one."""
        entity = entity or UNKNOWN
        now = self._clock() if now is None else now
        with self._lock:
            previous = self._line_counts.get(entity, line_count)
            self._line_counts[entity] = line_count
        record = HeartbeatRecord(
            project=project or UNKNOWN,
            timestamp=now,
            entity=entity,
            entity_type=self.settings.entity_type,
            language=language or UNKNOWN,
            app=self.settings.app_name,
            lines=abs(line_count - previous),
            cursorpos=cursor,
            is_write=is_write,
        )
        logger.info(
            "Logging %s heartbeat for: %s | Lines edited: %d",
            "write" if is_write else "edit",
            entity,
            record.lines,
        )
        self._submit(record)
        return record

    def open_span(self, entity: str) -> Optional[ActivitySpan]:
        with self._lock:
            return self._spans.get(entity)

    def open_entities(self) -> list[str]:
        with self._lock:
            return list(self._spans)

    def _close_locked(self, entity: str, now: int) -> Optional[EventRecord]:
        span = self._spans.pop(entity, None)
        if span is None:
            return None
        record = EventRecord(
            timestamp=span.opened_at,
            activity_type=span.activity_type,
            app=self.settings.app_name,
            entity=span.entity,
            entity_type=self.settings.entity_type,
            duration=round(span.accumulated_duration),
            project=span.project,
            language=span.language,
            end_timestamp=now,
        )
        logger.info(
            "Logged summarized event: %s | File: %s | Language: %s | Project: %s | Duration: %ds",
            span.activity_type,
            span.entity,
            span.language,
            span.project,
            record.duration,
        )
        return record

    def _submit(self, record: EventRecord | HeartbeatRecord) -> None:
        try:
            self.reporter.submit(record)
        except Exception:
            logger.exception("Failed to hand %s for %s to reporter", record.kind, record.entity)
