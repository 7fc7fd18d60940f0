from __future__ import annotations

import pytest

from cookbook.config import settings


@pytest.fixture(autouse=True)
def _quiet_settings(monkeypatch):
    """Keep the log level independent of COOKBOOK_LOG_LEVEL in the shell."""
    monkeypatch.setattr(settings, "log_level", "INFO")
    yield


@pytest.fixture()
def counting_factory():
    """Factory that records how many times it was called."""
    calls = {"count": 0}

    def factory():
        calls["count"] += 1
        return object()

    factory.calls = calls
    return factory
