from __future__ import annotations

from edit_tracker.models import EventRecord, HeartbeatRecord


def test_event_args():
    record = EventRecord(
        timestamp=100,
        activity_type="coding",
        app="vscode",
        entity="/w/a.py",
        entity_type="file",
        duration=42,
        project="/w",
        language="python",
        end_timestamp=160,
    )

    assert record.to_args() == [
        "event",
        "--timestamp", "100",
        "--activity-type", "coding",
        "--app", "vscode",
        "--entity", "/w/a.py",
        "--entity-type", "file",
        "--duration", "42",
        "--project", "/w",
        "--language", "python",
        "--end-timestamp", "160",
    ]


def test_heartbeat_write_flag_only_when_true():
    record = HeartbeatRecord(
        project="/w",
        timestamp=100,
        entity="/w/a.py",
        entity_type="file",
        language="python",
        app="vscode",
        lines=3,
        cursorpos=12,
    )

    args = record.to_args()
    assert args[0] == "heartbeat"
    assert args[args.index("--lines") + 1] == "3"
    assert args[args.index("--cursorpos") + 1] == "12"
    assert "--is-write" not in args

    write = HeartbeatRecord(**{**_fields(record), "is_write": True})
    assert write.to_args()[-1] == "--is-write"


def _fields(record):
    return {name: getattr(record, name) for name in record.__dataclass_fields__}
