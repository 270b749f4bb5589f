"""
Per-connection chat session.

A ChatSession owns one accepted WebSocket and one resolved character for
its whole life. It runs a receive → decode → reply → send loop until the
socket closes or an I/O error occurs; frames are handled strictly in
arrival order.
"""

import uuid
from dataclasses import asdict, dataclass

from pydantic import ValidationError
from starlette.websockets import WebSocket, WebSocketDisconnect, WebSocketState

from charchat.characters import Character, generate_reply
from charchat.logger import get_logger
from charchat.session.models import AssistantMessage, ClientMessage

logger = get_logger(__name__)


@dataclass
class SessionStats:
    """Frame counters reported when a session ends."""

    received: int = 0
    replied: int = 0
    ignored: int = 0
    malformed: int = 0


class ChatSession:
    """
    One client's conversation with one character.

    Protocol:
        Client -> Server:
            {"type": "user_message", "text": "Is justice real?"}

        Server -> Client:
            {"type": "assistant_message", "role": "assistant",
             "text": "Socrates: Why do you say \"Is justice real?\"?"}

    Frames of any other type are ignored. Frames that are not valid JSON
    objects are logged and dropped; neither ends the session.
    """

    def __init__(self, websocket: WebSocket, character: Character):
        self.websocket = websocket
        self.character = character
        self.session_id = uuid.uuid4().hex[:8]
        self.stats = SessionStats()

    def handle_frame(self, raw: str | bytes) -> AssistantMessage | None:
        """Decode one inbound frame and build the reply, if any."""
        self.stats.received += 1

        try:
            message = ClientMessage.model_validate_json(raw)
        except ValidationError as e:
            self.stats.malformed += 1
            logger.warning(
                f"[{self.session_id}] Invalid client message: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
            )
            return None

        if not message.is_user_message:
            self.stats.ignored += 1
            logger.debug(f"[{self.session_id}] Ignoring message type '{message.type}'")
            return None

        reply = generate_reply(self.character, message.text)
        return AssistantMessage(text=reply)

    async def run(self) -> None:
        """Run the message loop until the connection ends."""
        logger.info(f"[{self.session_id}] Session started with '{self.character.id}'")

        try:
            while True:
                raw = await self._receive_frame()
                reply = self.handle_frame(raw)
                if reply is None:
                    continue

                await self.websocket.send_json(reply.model_dump())
                self.stats.replied += 1

        except WebSocketDisconnect as e:
            logger.info(f"[{self.session_id}] Client disconnected (code={e.code})")
        except Exception as e:
            logger.exception(f"[{self.session_id}] Session terminated by error: {e}")
        finally:
            await self._release()
            logger.info(f"[{self.session_id}] Session ended {asdict(self.stats)}")

    async def _receive_frame(self) -> str | bytes:
        """Wait for the next text or binary frame."""
        message = await self.websocket.receive()

        if message["type"] == "websocket.disconnect":
            raise WebSocketDisconnect(
                code=message.get("code", 1000), reason=message.get("reason")
            )

        if message.get("text") is not None:
            return message["text"]
        return message.get("bytes") or b""

    async def _release(self) -> None:
        """Close the socket unless either side already has."""
        if (
            self.websocket.application_state == WebSocketState.DISCONNECTED
            or self.websocket.client_state == WebSocketState.DISCONNECTED
        ):
            return

        try:
            await self.websocket.close()
        except Exception as e:
            logger.debug(f"[{self.session_id}] Error closing socket: {e}")
