"""
Health check endpoint.
"""

import time
from datetime import datetime

from starlette.requests import Request
from starlette.responses import JSONResponse

from charchat.routes._state import get_catalog

start_time = time.time()


async def health_check(request: Request) -> JSONResponse:
    """
    Basic health check endpoint.

    Returns 200 if service is running.
    """
    catalog = get_catalog(request)
    return JSONResponse({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "uptime_seconds": int(time.time() - start_time),
        "characters": len(catalog) if catalog is not None else 0,
    })
