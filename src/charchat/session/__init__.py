"""
Chat sessions: one WebSocket conversation with one character.
"""

from charchat.session.chat_session import ChatSession, SessionStats
from charchat.session.models import (
    ASSISTANT_MESSAGE,
    USER_MESSAGE,
    AssistantMessage,
    ClientMessage,
)

__all__ = [
    "ASSISTANT_MESSAGE",
    "USER_MESSAGE",
    "AssistantMessage",
    "ChatSession",
    "ClientMessage",
    "SessionStats",
]
