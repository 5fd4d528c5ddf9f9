import pytest

from settings import settings_provider


@pytest.fixture
def fresh_settings_singleton(monkeypatch):
    """Empty the process-wide SettingsStore slot for the duration of a test."""
    monkeypatch.setattr(settings_provider, "_SETTINGS_STORE", None)
    yield settings_provider
