"""Per-user locations for the tracker's files."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

_DIRS = PlatformDirs(appname="EditTracker", appauthor="EditTracker", roaming=True)


def get_data_dir(*, create: bool = True) -> Path:
    return _ensure(Path(_DIRS.user_data_path), create)


def get_log_path(*, create: bool = True) -> Path:
    """Location of the optional log file; only the directory is created."""
    return _ensure(Path(_DIRS.user_log_path), create) / "edit-tracker.log"


def _ensure(path: Path, create: bool) -> Path:
    if create:
        path.mkdir(parents=True, exist_ok=True)
    return path
