"""Global exception handlers for the FastAPI application.

The framework already answers unknown paths (404) and wrong methods (405);
these handlers only log around that behavior and give unexpected errors a
plain-text 500 body.
"""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


async def log_http_exception(request: Request, exc: StarletteHTTPException):
    """Log a framework HTTP error and delegate to FastAPI's default handler."""
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}")
    return await http_exception_handler(request, exc)


async def unhandled_exception(request: Request, exc: Exception) -> PlainTextResponse:
    """Log an unexpected error in one line and answer 500.

    Starlette re-raises the exception after this response is sent, so the
    server logs the traceback; logging it here too would duplicate it.
    """
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return PlainTextResponse("Internal Server Error", status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, log_http_exception)
    app.add_exception_handler(Exception, unhandled_exception)
    logger.debug("Registered exception handlers")
