"""
Character personas for charchat.

Characters are loaded once at startup into a read-only catalog; each chat
session picks one and replies in its style.
"""

from charchat.characters.base import Character
from charchat.characters.catalog import (
    BUILTIN_CHARACTERS,
    CatalogError,
    CharacterCatalog,
    load_catalog,
)
from charchat.characters.models import CharacterInfo
from charchat.characters.reply import generate_reply

__all__ = [
    "BUILTIN_CHARACTERS",
    "CatalogError",
    "Character",
    "CharacterCatalog",
    "CharacterInfo",
    "generate_reply",
    "load_catalog",
]
