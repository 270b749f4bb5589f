"""
Interactive chat over the WebSocket protocol.

Usage:
    charchat chat "Is justice real?"
    charchat chat --character harry
"""

import asyncio
import json
import sys
from typing import AsyncIterator, List, Optional

import typer
import websockets

from charchat.cli._http import get_ws_url
from charchat.session.models import USER_MESSAGE, ClientMessage


async def _stdin_lines() -> AsyncIterator[str]:
    """Yield stdin lines without blocking the event loop."""
    while True:
        line = await asyncio.to_thread(sys.stdin.readline)
        if not line:
            return
        yield line.rstrip("\n")


async def _as_async(items: List[str]) -> AsyncIterator[str]:
    for item in items:
        yield item


async def run_chat(url: str, lines: AsyncIterator[str]) -> int:
    """Send each line as a user message and print the reply. Returns reply count."""
    replies = 0
    async with websockets.connect(url) as ws:
        async for line in lines:
            frame = ClientMessage(type=USER_MESSAGE, text=line)
            await ws.send(json.dumps(frame.model_dump()))

            data = json.loads(await ws.recv())
            typer.secho(data.get("text", ""), fg=typer.colors.CYAN)
            replies += 1
    return replies


def register_chat(app: typer.Typer):
    """Register the chat command onto the app."""

    @app.command()
    def chat(
        messages: Optional[List[str]] = typer.Argument(
            None, help="Messages to send; reads stdin when omitted"
        ),
        character: str = typer.Option(
            "", "--character", "-c", help="Character id (default: first character)"
        ),
    ):
        """Chat with a character."""
        url = get_ws_url(character)
        lines = _as_async(messages) if messages else _stdin_lines()

        try:
            asyncio.run(run_chat(url, lines))
        except (OSError, websockets.exceptions.WebSocketException) as e:
            typer.echo(f"❌ Connection failed: {e}")
            raise typer.Exit(code=1)
