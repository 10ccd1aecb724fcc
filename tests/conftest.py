from __future__ import annotations

import pytest

from edit_tracker.aggregator import Aggregator
from edit_tracker.config import TrackerSettings
from edit_tracker.models import EventRecord, HeartbeatRecord


class FakeClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


class RecordingReporter:
    def __init__(self) -> None:
        self.records: list[EventRecord | HeartbeatRecord] = []
        self.fail = False
        self.closed = False

    def submit(self, record: EventRecord | HeartbeatRecord) -> None:
        if self.fail:
            raise RuntimeError("collector unreachable")
        self.records.append(record)

    def close(self) -> None:
        self.closed = True

    @property
    def events(self) -> list[EventRecord]:
        return [r for r in self.records if isinstance(r, EventRecord)]

    @property
    def heartbeats(self) -> list[HeartbeatRecord]:
        return [r for r in self.records if isinstance(r, HeartbeatRecord)]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def aggregator(reporter: RecordingReporter, clock: FakeClock) -> Aggregator:
    return Aggregator(reporter, settings=TrackerSettings(), clock=clock)
