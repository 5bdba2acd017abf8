"""Logging configuration for the ping server."""

import logging
import sys

from loguru import logger

# Loggers owned by the server stack; kept at the application level
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "starlette", "asyncio", "ping_server")


class InterceptHandler(logging.Handler):
    """Intercept standard logging messages toward loguru."""

    def emit(self, record):
        # Get corresponding loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str) -> None:
    """Configure loguru logging for the entire application.

    Args:
        log_level: Log level to use (from settings, which handles env vars and CLI args).
    """
    log_level = log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=log_level, colorize=True)

    logger.info(f"Log level set to: {log_level}")

    # Redirect all standard logging to loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # uvicorn installs its own handlers before the app starts; replace them
    for name in list(logging.Logger.manager.loggerDict):
        logging_logger = logging.getLogger(name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    # stdlib logging has no TRACE level
    stdlib_level = "DEBUG" if log_level == "TRACE" else log_level
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(stdlib_level)
