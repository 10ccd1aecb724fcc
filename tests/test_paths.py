from __future__ import annotations

import sys

import pytest

from edit_tracker import paths

pytestmark = pytest.mark.skipif(
    not sys.platform.startswith("linux"), reason="XDG overrides only apply on Linux"
)


@pytest.fixture
def xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    return tmp_path


def test_lookup_without_create_leaves_disk_alone(xdg):
    data_dir = paths.get_data_dir(create=False)
    log_path = paths.get_log_path(create=False)

    assert data_dir.is_relative_to(xdg / "data")
    assert log_path.name == "edit-tracker.log"
    assert not data_dir.exists()
    assert not log_path.parent.exists()


def test_create_makes_directories(xdg):
    assert paths.get_data_dir().is_dir()
    log_path = paths.get_log_path()
    assert log_path.parent.is_dir()
    assert not log_path.exists()
