"""Shared pytest fixtures and configuration."""

import pytest
from loguru import logger
from starlette.testclient import TestClient

from charchat.characters import BUILTIN_CHARACTERS, Character, CharacterCatalog
from charchat.server import create_app


@pytest.fixture
def catalog():
    """The built-in two-character catalog."""
    return CharacterCatalog(BUILTIN_CHARACTERS)


@pytest.fixture
def socrates(catalog):
    return catalog.lookup("socrates")


@pytest.fixture
def harry(catalog):
    return catalog.lookup("harry")


@pytest.fixture
def plain_character():
    """A character whose persona matches no reply style."""
    return Character(id="bob", display_name="Bob", persona_description="a friendly baker")


@pytest.fixture
def client(catalog, tmp_path):
    """Test client for an app without a front end."""
    app = create_app(catalog=catalog, static_dir=tmp_path / "missing")
    return TestClient(app)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
