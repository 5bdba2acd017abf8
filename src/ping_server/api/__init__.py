"""HTTP routers."""

from ping_server.api.ping import router as ping_router

__all__ = ["ping_router"]
