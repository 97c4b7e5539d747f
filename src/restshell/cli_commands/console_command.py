"""Interactive console CLI command."""

import typer

from .shared import app, console, open_session


@app.command(name="console")
def console_cmd(
    url: str | None = typer.Argument(None, help="Starting URL (relative to http://localhost/)"),
    mode: str | None = typer.Option(None, "--mode", "-m", help="Content mode: none, plain, json, xml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show requests and tool calls"),
) -> None:
    """Start the interactive console."""
    from restshell.console import ConsoleApp

    session = open_session(verbose=verbose, mode=mode)
    if url:
        session.cq(url)
    ConsoleApp(session, console=console).run()
