"""Allow ``python -m ping_server``."""

from ping_server.main import app

if __name__ == "__main__":
    app()
