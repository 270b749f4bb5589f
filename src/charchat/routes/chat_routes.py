"""
Routes for chat sessions.

Provides:
- WebSocket endpoint for chat sessions (/ws?character_id=...)
- A plain HTTP fallback on the same path for requests that did not upgrade
"""

from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.websockets import WebSocket

from charchat.logger import get_logger
from charchat.routes._state import get_catalog
from charchat.session import ChatSession

logger = get_logger(__name__)


async def chat_websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for chat sessions.

    The optional ``character_id`` query parameter picks the character;
    a missing, blank or unknown id falls back to the first character in
    the catalog. The character is fixed for the life of the connection.
    """
    catalog = get_catalog(websocket)
    if catalog is None:
        await websocket.close(code=1011, reason="Character catalog not loaded")
        return

    character = catalog.resolve(websocket.query_params.get("character_id"))

    await websocket.accept()
    session = ChatSession(websocket, character)
    await session.run()


async def websocket_upgrade_required(request: Request) -> PlainTextResponse:
    """GET /ws without an Upgrade header — no session is created."""
    logger.warning(f"Rejected non-WebSocket request to {request.url.path}")
    return PlainTextResponse("failed websocket upgrade", status_code=400)
