"""Shared CLI app objects and session helpers."""

import typer
from rich.console import Console

from restshell.config import is_verbose
from restshell.errors import RestShellError
from restshell.modules.session import RestSession
from restshell.utils.debug import set_debug_enabled

app = typer.Typer(
    name="restshell",
    help="Interactive shell for exploring REST APIs",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def open_session(verbose: bool = False, mode: str | None = None) -> RestSession:
    """Create a session with defaults applied, exiting with 1 when that fails."""
    set_debug_enabled(verbose or is_verbose())
    try:
        session = RestSession(console=console, err_console=err_console)
    except RestShellError as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False)
        raise typer.Exit(1) from exc

    if mode and not session.mode(mode):
        session.close()
        raise typer.Exit(2)
    return session
