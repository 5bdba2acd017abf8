"""Global constants for the ping server.

The endpoint path and its payload live here so the router, the startup
summary and the tests all agree on them.
"""

PING_PATH = "/rest"
PING_PAYLOAD = "ping"
