"""Access to objects stored on the application state."""

from charchat.characters import CharacterCatalog


def get_catalog(request_or_ws) -> CharacterCatalog | None:
    """Get the CharacterCatalog from app state."""
    app = getattr(request_or_ws, "app", None)
    if app is None:
        return None
    return getattr(app.state, "catalog", None)
