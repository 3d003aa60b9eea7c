"""Pytest configuration and fixtures for the test suite."""

import json
import logging

import pytest
import structlog

from anki_bridge.anki.client import AnkiConnectClient, AsyncAnkiConnectClient
from tests.fixtures import FakeAsyncTransport, FakeTransport


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch, tmp_path):
    """Keep ANKI_CONNECT_* variables and any local .env out of tests."""
    for name in ("HOST", "PORT", "SCHEME", "API_KEY", "TIMEOUT", "VERSION"):
        monkeypatch.delenv(f"ANKI_CONNECT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)

@pytest.fixture
def transport():
    """Provide an empty fake transport; queue replies per test."""
    return FakeTransport()

@pytest.fixture
def async_transport():
    """Provide an empty fake async transport."""
    return FakeAsyncTransport()

@pytest.fixture
def anki(transport):
    """Provide a blocking client over the fake transport."""
    return AnkiConnectClient(transport)

@pytest.fixture
def async_anki(async_transport):
    """Provide an async client over the fake async transport."""
    return AsyncAnkiConnectClient(async_transport)

@pytest.fixture
def sent(transport):
    """Return a callable decoding every request the fake transport saw."""
    return lambda: [json.loads(r) for r in transport.requests]


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging after each test."""
    yield
    from anki_bridge.utils import logging as anki_logging

    root_logger = logging.getLogger()
    for handler in anki_logging._handlers:
        root_logger.removeHandler(handler)
        handler.close()
    anki_logging._handlers.clear()
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()
