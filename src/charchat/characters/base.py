"""
Core data model for characters.

A character is a named persona a chat session speaks as. Characters are
built once at startup and shared read-only by every session.
"""

from dataclasses import dataclass
from typing import Any

from charchat.characters.models import CharacterInfo


@dataclass(frozen=True)
class Character:
    """
    A conversational persona.

    Example:
        Character(
            id="socrates",
            display_name="Socrates",
            persona_description="philosopher: ask probing questions.",
        )
    """

    id: str
    display_name: str
    persona_description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire field names."""
        return {
            "id": self.id,
            "name": self.display_name,
            "persona": self.persona_description,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Character":
        """
        Build a character from wire field names.

        Raises:
            pydantic.ValidationError: If a field is missing or not a string.
        """
        info = CharacterInfo.model_validate(data)
        return cls(
            id=info.id,
            display_name=info.name,
            persona_description=info.persona,
        )
