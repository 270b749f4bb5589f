"""
The character catalog: an ordered, immutable list of characters.

Lookups never mutate the catalog, so sessions share a single instance
without any locking.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator, Optional

from pydantic import ValidationError

from charchat.characters.base import Character
from charchat.logger import get_logger

logger = get_logger(__name__)

BUILTIN_CHARACTERS = (
    Character(
        id="socrates",
        display_name="Socrates",
        persona_description="philosopher: ask probing questions.",
    ),
    Character(
        id="harry",
        display_name="Harry (inspired)",
        persona_description="wizard: curious and brave.",
    ),
)


class CatalogError(ValueError):
    """Raised when a catalog cannot be built."""


class CharacterCatalog:
    """Read-only, ordered collection of characters.

    The first character is the default used when a session asks for an
    unknown or blank id.
    """

    def __init__(self, characters: Iterable[Character]):
        self._characters: tuple[Character, ...] = tuple(characters)

        if not self._characters:
            raise CatalogError("Character catalog must contain at least one entry")

        seen = set()
        for character in self._characters:
            if character.id in seen:
                raise CatalogError(f"Duplicate character id: {character.id!r}")
            seen.add(character.id)

    def __iter__(self) -> Iterator[Character]:
        return iter(self._characters)

    def __len__(self) -> int:
        return len(self._characters)

    def lookup(self, key: Optional[str]) -> Optional[Character]:
        """
        Find a character by id.

        Surrounding whitespace in ``key`` is ignored. Returns None for a
        missing, blank or unknown key.
        """
        key = (key or "").strip()
        if not key:
            return None

        for character in self._characters:
            if character.id == key:
                return character
        return None

    def default_character(self) -> Character:
        """Return the first character in catalog order."""
        return self._characters[0]

    def resolve(self, key: Optional[str]) -> Character:
        """Look up ``key``, falling back to the default character."""
        character = self.lookup(key)
        if character is None:
            character = self.default_character()
            if key and key.strip():
                logger.info(
                    f"Unknown character '{key.strip()}', using default '{character.id}'"
                )
        return character

    def to_list(self) -> list[dict]:
        """Serialize every character with wire field names, in order."""
        return [c.to_dict() for c in self._characters]

    @classmethod
    def from_file(cls, path: Path) -> "CharacterCatalog":
        """
        Load a catalog from a JSON file.

        The file holds an array of ``{"id", "name", "persona"}`` objects,
        in the order the catalog should keep.

        Raises:
            CatalogError: If the file is unreadable or malformed.
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read character file {path}: {e}") from e

        if not isinstance(data, list):
            raise CatalogError(f"Character file {path} must contain a JSON array")

        try:
            characters = [Character.from_dict(item) for item in data]
        except ValidationError as e:
            raise CatalogError(
                f"Invalid character entry in {path}: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
            ) from e

        catalog = cls(characters)
        logger.info(f"Loaded {len(catalog)} characters from {path}")
        return catalog


def load_catalog(characters_file: Optional[Path] = None) -> CharacterCatalog:
    """Build the catalog from a file when given, else the built-in characters."""
    if characters_file:
        return CharacterCatalog.from_file(characters_file)
    return CharacterCatalog(BUILTIN_CHARACTERS)
