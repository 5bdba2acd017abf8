"""Shared fixtures for the ping server tests."""

import sys

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from ping_server.app import create_app
from ping_server.settings import Settings, get_settings


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, ignoring env and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client(settings: Settings):
    """Test client for a fresh app; the context manager runs the lifespan."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    # Removed by _reset_logging_and_settings on teardown
    logger.add(messages.append, format="{level} {message}", level="TRACE")
    return messages


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    """Undo global state that setup_logging() and CLI overrides leave behind."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()
    logger.add(sys.stderr)
