"""Ping API endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ping_server.constants import PING_PATH, PING_PAYLOAD

router = APIRouter(tags=["System"])


@router.get(PING_PATH, response_class=PlainTextResponse)
async def ping() -> str:
    """
    Simple ping endpoint that returns the literal text ``ping``.

    The endpoint reads nothing from the request and holds no state, so every
    call returns the same 200 response.
    """
    return PING_PAYLOAD
