"""
Pydantic schema for a character as it appears on the wire and in
character files.
"""

from pydantic import BaseModel


class CharacterInfo(BaseModel):
    """One entry of a character file and of the GET /api/characters response."""

    id: str
    name: str
    persona: str = ""
