"""
Pydantic models for the chat protocol frames exchanged during a session.
"""

from typing import Any

from pydantic import BaseModel, model_validator

USER_MESSAGE = "user_message"
ASSISTANT_MESSAGE = "assistant_message"


class ClientMessage(BaseModel):
    """Client → Server: any frame sent by the browser.

    Only frames with ``type == "user_message"`` get a reply; fields the
    server does not know about are ignored.
    """

    type: str = ""
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_empty(cls, data: Any) -> Any:
        # A JSON null, whole frame or field, reads as empty
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                key: "" if key in ("type", "text") and value is None else value
                for key, value in data.items()
            }
        return data

    @property
    def is_user_message(self) -> bool:
        return self.type == USER_MESSAGE


class AssistantMessage(BaseModel):
    """Server → Client: the character's reply."""

    type: str = ASSISTANT_MESSAGE
    role: str = "assistant"
    text: str
