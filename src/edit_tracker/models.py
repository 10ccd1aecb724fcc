"""Domain models for aggregated editor activity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ActivitySpan:
    """Represents a contiguous block of one activity type on one file."""

    entity: str
    activity_type: str
    opened_at: int
    language: str
    project: str
    accumulated_duration: float = 0.0


@dataclass(frozen=True, slots=True)
class EventRecord:
    """A closed activity span, ready to be sent to the collector."""

    timestamp: int
    activity_type: str
    app: str
    entity: str
    entity_type: str
    duration: int
    project: str
    language: str
    end_timestamp: int

    kind = "event"

    def to_args(self) -> list[str]:
        return [
            self.kind,
            "--timestamp",
            str(self.timestamp),
            "--activity-type",
            self.activity_type,
            "--app",
            self.app,
            "--entity",
            self.entity,
            "--entity-type",
            self.entity_type,
            "--duration",
            str(self.duration),
            "--project",
            self.project,
            "--language",
            self.language,
            "--end-timestamp",
            str(self.end_timestamp),
        ]


@dataclass(frozen=True, slots=True)
class HeartbeatRecord:
    """A point-in-time ping for one file."""

    project: str
    timestamp: int
    entity: str
    entity_type: str
    language: str
    app: str
    lines: int
    cursorpos: int
    is_write: bool = False

    kind = "heartbeat"

    def to_args(self) -> list[str]:
        args = [
            self.kind,
            "--project",
            self.project,
            "--timestamp",
            str(self.timestamp),
            "--entity",
            self.entity,
            "--entity-type",
            self.entity_type,
            "--language",
            self.language,
            "--app",
            self.app,
            "--lines",
            str(self.lines),
            "--cursorpos",
            str(self.cursorpos),
        ]
        if self.is_write:
            args.append("--is-write")
        return args
