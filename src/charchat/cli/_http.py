"""
Shared HTTP helpers for CLI commands that talk to the running server.
"""

import os
from urllib.parse import urlencode

import typer


def get_server_url() -> str:
    """Get the server URL from environment or default."""
    url = os.getenv("CHARCHAT_SERVER_URL")
    if url:
        return url.rstrip("/")

    host = os.getenv("CHARCHAT_HOST", "localhost")
    if host == "0.0.0.0":
        host = "localhost"
    port = os.getenv("CHARCHAT_PORT", "8080")
    return f"http://{host}:{port}"


def get_ws_url(character_id: str | None = None) -> str:
    """Get the chat WebSocket URL, optionally selecting a character."""
    base = get_server_url()
    if base.startswith("https://"):
        base = "wss://" + base[len("https://"):]
    elif base.startswith("http://"):
        base = "ws://" + base[len("http://"):]

    url = f"{base}/ws"
    if character_id:
        url += "?" + urlencode({"character_id": character_id})
    return url


def _http_get(path: str):
    """Make a GET request to the running server."""
    import httpx

    url = f"{get_server_url()}{path}"
    try:
        resp = httpx.get(url, timeout=10.0)
        resp.raise_for_status()
        return resp.json()
    except httpx.ConnectError:
        typer.echo("❌ Cannot connect to charchat server. Is it running?")
        raise typer.Exit(code=1)
    except httpx.HTTPStatusError as e:
        typer.echo(f"❌ Server error: {e.response.status_code}")
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"❌ Error: {e}")
        raise typer.Exit(code=1)
