"""
Routes for the character catalog.
"""

from starlette.requests import Request
from starlette.responses import JSONResponse

from charchat.routes._state import get_catalog


async def list_characters(request: Request) -> JSONResponse:
    """GET /api/characters — List every character in catalog order."""
    catalog = get_catalog(request)
    if catalog is None:
        return JSONResponse({"error": "Character catalog not loaded"}, status_code=503)

    return JSONResponse(catalog.to_list())
