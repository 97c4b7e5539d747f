"""restshell CLI - interactive shell for exploring REST APIs."""

from restshell import __version__
from restshell.cli_commands import call_command, console_command, doctor_command  # noqa: F401
from restshell.cli_commands.shared import app, console


@app.command()
def version() -> None:
    """Show the installed restshell version."""
    console.print(f"restshell {__version__}")


def main():
    """Entry point for the CLI."""
    app()
