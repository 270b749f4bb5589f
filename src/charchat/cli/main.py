"""
Top-level CLI commands: serve, characters.
"""

from typing import Optional

import typer

from charchat.cli._http import _http_get


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from charchat.logger import setup_logging

    log_level = "DEBUG" if verbose else "WARNING"
    setup_logging(level=log_level)


def register_commands(app: typer.Typer):
    """Register top-level commands onto the app."""

    @app.command()
    def serve(
        host: Optional[str] = typer.Option(None, help="Host to bind to"),
        port: Optional[int] = typer.Option(None, help="Port to bind to"),
        debug: bool = typer.Option(False, "--debug", help="Run in debug mode"),
    ):
        """Start the charchat server."""
        from charchat.server import main as run_server

        typer.echo("🚀 Starting charchat server...")
        try:
            run_server(host=host, port=port, debug=debug)
        except KeyboardInterrupt:
            typer.echo("\n🛑 Server stopped.")

    @app.command()
    def characters():
        """List the characters offered by the running server."""
        data = _http_get("/api/characters")

        if not data:
            typer.echo("No characters available.")
            return

        typer.echo(f"🎭 Characters ({len(data)}):\n")
        for index, character in enumerate(data):
            marker = " (default)" if index == 0 else ""
            typer.echo(
                f"  • {character['name']}{marker}\n"
                f"     ID: {character['id']}\n"
                f"     Persona: {character['persona']}\n"
            )
