"""Configuration models and helpers for the edit tracker."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from datetime import timedelta

UNKNOWN = "unknown"


@dataclass(slots=True)
class TrackerSettings:
    """Runtime configuration for the aggregator, scheduler and reporter."""

    flush_interval: timedelta = timedelta(seconds=60)
    app_name: str = "vscode"
    entity_type: str = "file"
    collector_command: tuple[str, ...] = ("activity-cli",)
    report_workers: int = 4
    report_timeout: timedelta = timedelta(seconds=30)

    @classmethod
    def from_options(
        cls,
        flush_seconds: float | None = None,
        app_name: str | None = None,
        collector_command: str | None = None,
    ) -> "TrackerSettings":
        defaults = cls()
        command = (
            tuple(shlex.split(collector_command))
            if collector_command
            else defaults.collector_command
        )
        return cls(
            flush_interval=(
                timedelta(seconds=flush_seconds)
                if flush_seconds is not None
                else defaults.flush_interval
            ),
            app_name=app_name or defaults.app_name,
            collector_command=command,
        )
