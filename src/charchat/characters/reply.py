"""
Reply generation.

A deterministic stand-in for a language model: the reply style is picked
from keywords in the character's persona description.
"""

from charchat.characters.base import Character


def generate_reply(character: Character, user_text: str) -> str:
    """Build the character's reply to ``user_text``.

    Keywords are checked in order and the first match wins, so a persona
    that mentions both "philosopher" and "wizard" replies as a philosopher.
    """
    name = character.display_name
    text = user_text.strip()
    if not text:
        return f"{name}: ..."

    persona = character.persona_description.lower()
    if "philosopher" in persona:
        return f'{name}: Why do you say "{text}"?'
    if "wizard" in persona:
        return f'{name}: That sounds magical — tell me more about "{text}".'
    return f"{name}: {text}"
