"""Main entry point for the ping server using Typer and Pydantic Settings."""

import os

import typer
import uvicorn
from loguru import logger
from pydantic import ValidationError

import ping_server
from ping_server.logging import setup_logging
from ping_server.settings import Settings, get_settings

app = typer.Typer(
    name="ping-server",
    help="Ping server - answers GET /rest with 'ping'",
    no_args_is_help=True,
)


HOST_OPTION = typer.Option(
    None,
    help="Host to bind the server to (overrides PING_SERVER_HOST)",
    metavar="<server>",
)  # fmt: skip
PORT_OPTION = typer.Option(
    None,
    help="Port to bind the server to (overrides PING_SERVER_PORT)",
    metavar="<port>",
)  # fmt: skip
RELOAD_OPTION = typer.Option(
    None,
    help="Enable/disable auto-reload (overrides PING_SERVER_RELOAD)",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides PING_SERVER_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip
ACCESS_LOG_OPTION = typer.Option(
    None,
    help="Enable/disable the per-request access log (overrides PING_SERVER_ACCESS_LOG)",
)  # fmt: skip


def _update_settings(
    host: str | None,
    port: int | None,
    log_level: str | None,
    reload: bool | None,
    access_log: bool | None,
) -> None:
    """Update the cached settings with CLI overrides.

    Args:
        host: Host override
        port: Port override
        log_level: Log level override
        reload: Reload override
        access_log: Access log override

    Raises:
        typer.BadParameter: If an override fails settings validation
    """
    settings = get_settings()

    overrides = {
        "host": host,
        "port": port,
        "log_level": log_level,
        "reload": reload,
        "access_log": access_log,
    }
    for name, value in overrides.items():
        if value is None:
            continue
        try:
            setattr(settings, name, value)
        except ValidationError as e:
            raise typer.BadParameter(e.errors()[0]["msg"], param_hint=f"--{name.replace('_', '-')}") from None


def _export_settings_to_env(settings: Settings) -> None:
    """Write the effective settings to ``PING_SERVER_*`` environment variables.

    The reload worker is a fresh process that re-imports the app and builds its
    own ``Settings`` from the environment, so CLI overrides have to travel there.

    Args:
        settings: Settings after CLI overrides were applied
    """
    for name, value in settings.model_dump().items():
        if isinstance(value, bool):
            value = str(value).lower()
        os.environ[f"PING_SERVER_{name.upper()}"] = str(value)


@app.command()
def run(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
    reload: bool = RELOAD_OPTION,
    access_log: bool = ACCESS_LOG_OPTION,
) -> None:
    """Run the ping server."""
    _update_settings(host, port, log_level, reload, access_log)

    settings = get_settings()

    setup_logging(settings.log_level)

    logger.info(f"Starting ping server on {settings.host}:{settings.port}")
    logger.info(f"Reload: {settings.reload}")

    # uvicorn has no TRACE level
    uvicorn_log_level = "debug" if settings.log_level == "TRACE" else settings.log_level.lower()

    # Reload mode needs an import string so the worker process can re-import the app
    if settings.reload:
        _export_settings_to_env(settings)

        uvicorn.run(
            "ping_server.app:app",
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=uvicorn_log_level,
            access_log=settings.access_log,
        )
    else:
        from ping_server.app import app as fastapi_app

        uvicorn.run(
            fastapi_app,
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=uvicorn_log_level,
            access_log=settings.access_log,
        )


@app.command()
def version() -> None:
    """Print the installed ping server version."""
    typer.echo(ping_server.__version__)


if __name__ == "__main__":
    app()
