"""
Starlette-based web server for charchat.

This server provides the following endpoints:
- /ws: WebSocket chat session with one character
- /api/characters: List available characters
- /health: Liveness check
- /: Static front-end bundle

Run with ``python -m charchat.server`` or ``charchat serve``.
"""

import sys
from pathlib import Path

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Mount, Route, WebSocketRoute
from starlette.staticfiles import StaticFiles

from charchat.characters import CharacterCatalog, load_catalog
from charchat.config import CONFIG
from charchat.logger import get_logger, setup_logging
from charchat.routes.character_routes import list_characters
from charchat.routes.chat_routes import (
    chat_websocket_endpoint,
    websocket_upgrade_required,
)
from charchat.routes.health_routes import health_check

logger = get_logger(__name__)


def create_app(
    catalog: CharacterCatalog | None = None,
    static_dir: Path | None = None,
) -> Starlette:
    """
    Build the application.

    Args:
        catalog: Characters to serve. Defaults to the configured catalog.
        static_dir: Front-end directory mounted at "/". Defaults to the
            configured directory; skipped if it does not exist.
    """
    if catalog is None:
        catalog = load_catalog(CONFIG.characters_file)
    if static_dir is None:
        static_dir = CONFIG.static_dir

    routes = [
        Route("/api/characters", list_characters, methods=["GET"]),
        Route("/health", health_check, methods=["GET"]),
        WebSocketRoute("/ws", chat_websocket_endpoint),
        Route("/ws", websocket_upgrade_required, methods=["GET"]),
    ]

    if Path(static_dir).is_dir():
        routes.append(
            Mount("/", app=StaticFiles(directory=static_dir, html=True), name="static")
        )
    else:
        logger.warning(f"Static directory not found, front end disabled: {static_dir}")

    app = Starlette(
        routes=routes,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
    )
    app.state.catalog = catalog

    names = ", ".join(c.id for c in catalog)
    logger.debug(f"Application created with characters: {names}")
    return app


def main(host: str | None = None, port: int | None = None, debug: bool = False):
    """Configure logging and run the server with uvicorn."""
    import uvicorn

    log_level = "DEBUG" if debug else CONFIG.log_level
    setup_logging(level=log_level, log_file=CONFIG.log_file)

    host = host or CONFIG.host
    port = port or CONFIG.port

    app = create_app()
    logger.info(f"Server running at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    main(debug="--debug" in sys.argv)
