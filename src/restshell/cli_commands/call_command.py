"""One-shot request CLI command."""

import typer

from .shared import app, err_console, open_session


def parse_header(item: str) -> tuple[str, str]:
    """Split ``Name: value``; raises typer.BadParameter when there is no name."""
    name, sep, value = item.partition(":")
    if not sep or not name.strip():
        raise typer.BadParameter(f"expected 'Name: value', got '{item}'", param_hint="--header")
    return name.strip(), value.strip()


@app.command()
def call(
    method: str = typer.Argument(..., help="HTTP method, e.g. GET or POST"),
    url: str | None = typer.Argument(None, help="URL, absolute or relative to http://localhost/"),
    header: list[str] | None = typer.Option(None, "--header", "-H", help="Request header 'Name: value'"),
    mode: str | None = typer.Option(None, "--mode", "-m", help="Content mode: none, plain, json, xml"),
    data: bool | None = typer.Option(
        None, "--data/--no-data", "-d/-n", help="Send (-d) or suppress (-n) the payload read from stdin"
    ),
    insecure: bool = typer.Option(False, "--insecure", "-k", help="Accept invalid TLS certificates"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the request and tool calls"),
) -> None:
    """Send one request and exit with its return code (22 for HTTP errors)."""
    headers = [parse_header(item) for item in header or []]

    session = open_session(verbose=verbose, mode=mode)
    try:
        if insecure:
            session.ssl_insecure("on")
        for name, value in headers:
            session.header(name, value)
        session.request(method.upper(), url, data)
        result = session.last_result
    finally:
        session.close()

    if result is None:
        raise typer.Exit(1)
    if result.exit_code:
        err_console.print(f"request failed with exit code {result.exit_code}", style="red")
    raise typer.Exit(result.returncode)
