"""
charchat CLI.

Commands:
- serve:      run the server
- characters: list characters on the running server
- chat:       talk to a character over the WebSocket protocol
"""

import typer

from charchat.cli._http import _http_get  # noqa: F401 — re-export for test patching
from charchat.cli.chat import register_chat
from charchat.cli.main import configure_logging, register_commands

app = typer.Typer(help="charchat - chat with character personas")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    charchat - chat with character personas.
    """
    configure_logging(verbose)


register_commands(app)
register_chat(app)

if __name__ == "__main__":
    app()
