"""The ping server package."""

from importlib.metadata import PackageNotFoundError, version

from .settings import Settings, get_settings  # noqa: F401

try:
    __version__ = version("ping-server")
except PackageNotFoundError:
    # Source checkout without installed distribution metadata
    __version__ = "0.1.0-dev"

__all__ = ["get_settings", "Settings", "__version__"]
