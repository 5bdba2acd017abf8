"""Application configuration using Pydantic Settings.

Values can be provided via environment variables (preferred), an optional
``.env`` file, or fall back to the defaults below. Retrieve the shared
instance through ``get_settings`` which caches it for the whole process.

Environment variable prefix: ``PING_SERVER_`` (e.g. ``PING_SERVER_PORT``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """Runtime server settings.

    Attributes map directly to environment variables using the ``PING_SERVER_``
    prefix (case-insensitive). For example, ``host`` <- ``PING_SERVER_HOST``.
    """

    host: str = Field(
        default="0.0.0.0",
        description="Host interface to bind the server",
    )  # fmt: skip
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Server port",
    )
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload in development",
    )  # fmt: skip
    access_log: bool = Field(
        default=True,
        description="Emit one uvicorn access log line per request",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(LOG_LEVELS))}")

        return v_upper

    model_config = SettingsConfigDict(
        env_prefix="PING_SERVER_",
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,  # CLI overrides are assigned after construction
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object to ensure consistent config.
    """

    return Settings()


__all__ = ["Settings", "get_settings", "LOG_LEVELS"]
