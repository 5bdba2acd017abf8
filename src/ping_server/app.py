"""Main FastAPI application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

import ping_server
from ping_server.api import ping_router
from ping_server.constants import PING_PATH
from ping_server.exception_handlers import register_exception_handlers
from ping_server.logging import setup_logging
from ping_server.settings import Settings, get_settings


def _log_server_endpoints_summary(settings: Settings) -> None:
    """Log the server URL and the endpoints it answers.

    Args:
        settings: Application settings containing host and port
    """
    server_url = f"http://{settings.host}:{settings.port}"
    logger.info(f"Server running at: {server_url}")

    endpoints = [
        ("Ping", PING_PATH),
        ("OpenAPI Schema", "/openapi.json"),
        ("API Docs", "/docs"),
    ]

    logger.info("Available endpoints:")
    for name, path in endpoints:
        logger.info(f"   {name}: {server_url}{path}")


@asynccontextmanager
async def app_lifespan(_app: FastAPI):
    """Handle startup and shutdown events for the application."""
    settings: Settings = _app.state.settings

    # Runs after uvicorn applied its logging config, so its loggers get intercepted too
    setup_logging(settings.log_level)

    _log_server_endpoints_summary(settings)

    yield

    logger.info("Ping server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to attach to the app; defaults to the cached ``get_settings()``

    Returns:
        The configured application with the ping router mounted.
    """
    app = FastAPI(
        lifespan=app_lifespan,
        title="Ping server",
        description="Answers GET /rest with the plain text 'ping'",
        version=ping_server.__version__,
    )
    app.state.settings = settings if settings is not None else get_settings()

    register_exception_handlers(app)

    app.include_router(ping_router, prefix="")

    return app


app = create_app()
