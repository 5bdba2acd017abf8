"""Tests for the typer command line."""

import os
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import ping_server
from ping_server.app import app as fastapi_app
from ping_server.app import create_app
from ping_server.main import app
from ping_server.settings import get_settings

runner = CliRunner()


@pytest.fixture
def mock_uvicorn_run():
    # Reload mode exports settings to os.environ; restore it after each test
    with patch.dict(os.environ), patch("ping_server.main.uvicorn.run") as mock_run, patch("ping_server.main.setup_logging"):
        yield mock_run


def test_run_uses_settings_defaults(mock_uvicorn_run, monkeypatch: pytest.MonkeyPatch):
    for var in ("PING_SERVER_HOST", "PING_SERVER_PORT", "PING_SERVER_RELOAD", "PING_SERVER_LOG_LEVEL", "PING_SERVER_ACCESS_LOG"):
        monkeypatch.delenv(var, raising=False)
    result = runner.invoke(app, ["run"])

    assert result.exit_code == 0, result.output
    mock_uvicorn_run.assert_called_once()
    args, kwargs = mock_uvicorn_run.call_args
    assert args[0] is fastapi_app
    assert kwargs["port"] == get_settings().port
    assert kwargs["reload"] is False


def test_run_applies_cli_overrides(mock_uvicorn_run):
    result = runner.invoke(
        app,
        ["run", "--host", "127.0.0.1", "--port", "9100", "--log-level", "debug", "--no-access-log"],
    )

    assert result.exit_code == 0, result.output
    _, kwargs = mock_uvicorn_run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9100
    assert kwargs["log_level"] == "debug"
    assert kwargs["access_log"] is False

    settings = get_settings()
    assert settings.host == "127.0.0.1"
    assert settings.log_level == "DEBUG"


def test_run_reload_uses_import_string(mock_uvicorn_run):
    result = runner.invoke(app, ["run", "--reload"])

    assert result.exit_code == 0, result.output
    args, kwargs = mock_uvicorn_run.call_args
    assert args[0] == "ping_server.app:app"
    assert kwargs["reload"] is True


def test_run_reload_passes_overrides_to_worker_settings(mock_uvicorn_run):
    result = runner.invoke(app, ["run", "--reload", "--port", "9100", "--log-level", "debug", "--no-access-log"])

    assert result.exit_code == 0, result.output
    assert os.environ["PING_SERVER_PORT"] == "9100"
    assert os.environ["PING_SERVER_LOG_LEVEL"] == "DEBUG"
    assert os.environ["PING_SERVER_ACCESS_LOG"] == "false"

    # The reload worker re-imports the app and builds settings from scratch
    get_settings.cache_clear()
    worker_settings = create_app().state.settings
    assert worker_settings.port == 9100
    assert worker_settings.log_level == "DEBUG"
    assert worker_settings.access_log is False
    assert worker_settings.reload is True


def test_run_without_reload_leaves_environment_alone(mock_uvicorn_run):
    before = dict(os.environ)
    result = runner.invoke(app, ["run", "--port", "9100"])

    assert result.exit_code == 0, result.output
    assert dict(os.environ) == before


def test_run_trace_level_passes_debug_to_uvicorn(mock_uvicorn_run):
    result = runner.invoke(app, ["run", "--log-level", "trace"])

    assert result.exit_code == 0, result.output
    assert mock_uvicorn_run.call_args.kwargs["log_level"] == "debug"


def test_run_rejects_invalid_log_level(mock_uvicorn_run):
    result = runner.invoke(app, ["run", "--log-level", "verbose"])

    assert result.exit_code == 2
    mock_uvicorn_run.assert_not_called()


def test_run_rejects_out_of_range_port(mock_uvicorn_run):
    result = runner.invoke(app, ["run", "--port", "70000"])

    assert result.exit_code == 2
    mock_uvicorn_run.assert_not_called()


def test_version_command():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.output.strip() == ping_server.__version__


def test_no_args_shows_help():
    result = runner.invoke(app, [])

    assert "run" in result.output
