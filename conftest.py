import pytest

import settings


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Point the settings file at a per-test location."""
    path = tmp_path / "time-picker-settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path
