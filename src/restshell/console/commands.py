"""Typer command table for the interactive console.

Each command receives the active :class:`RestSession` as ``ctx.obj`` and
returns the session's success flag.
"""

import typer

from restshell.modules.session import RestSession

shell = typer.Typer(
    name="restshell-console",
    help="Commands available at the restshell prompt.",
    add_completion=False,
)

def _session(ctx: typer.Context) -> RestSession:
    return ctx.obj


# -- headers and options -----------------------------------------------


@shell.command()
def header(
    ctx: typer.Context,
    name: str | None = typer.Argument(None, help="Header name"),
    values: list[str] | None = typer.Argument(None, help="Header value"),
    delete: bool = typer.Option(False, "-d", help="Remove the header"),
) -> bool:
    """Show, set or remove a request header; no name lists all headers."""
    return _session(ctx).header(name, *(values or []), delete=delete)


@shell.command()
def accept(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None),
    delete: bool = typer.Option(False, "-d", help="Remove the header"),
) -> bool:
    """Show or set the Accept header."""
    return _session(ctx).accept(*(values or []), delete=delete)


@shell.command()
def authorization(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None),
    delete: bool = typer.Option(False, "-d", help="Remove the header"),
) -> bool:
    """Show or set the Authorization header."""
    return _session(ctx).authorization(*(values or []), delete=delete)


@shell.command(name="content-type")
def content_type(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None),
    delete: bool = typer.Option(False, "-d", help="Remove the header"),
) -> bool:
    """Show or set the Content-Type header."""
    return _session(ctx).content_type(*(values or []), delete=delete)


@shell.command()
def cookie(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None),
    delete: bool = typer.Option(False, "-d", help="Remove the header"),
) -> bool:
    """Show or set the Cookie header."""
    return _session(ctx).cookie(*(values or []), delete=delete)


@shell.command(name="basic-auth")
def basic_auth(
    ctx: typer.Context,
    user: str | None = typer.Argument(None),
    password: str | None = typer.Argument(None),
) -> bool:
    """Set Basic credentials; prompts for what is missing, empty user clears."""
    return _session(ctx).basic_auth(user, password)


@shell.command(name="ssl-insecure")
def ssl_insecure(ctx: typer.Context, setting: str | None = typer.Argument(None)) -> bool:
    """Show or toggle acceptance of invalid TLS certificates."""
    return _session(ctx).ssl_insecure(setting)


@shell.command(name="cookie-jar")
def cookie_jar(ctx: typer.Context, setting: str | None = typer.Argument(None)) -> bool:
    """Show or set the cookie jar: on, off or a file."""
    return _session(ctx).cookie_jar(setting)


@shell.command(name="user-agent")
def user_agent(
    ctx: typer.Context,
    value: str | None = typer.Argument(None),
    delete: bool = typer.Option(False, "-d", help="Restore the default user agent"),
) -> bool:
    """Show or set the User-Agent."""
    return _session(ctx).user_agent(value, delete=delete)


# -- navigation, modes and history -----------------------------------------


@shell.command()
def cq(ctx: typer.Context, target: str = typer.Argument("", help="Relative or absolute URL")) -> bool:
    """Change the current URL ('-' returns to the previous one)."""
    return _session(ctx).cq(target)


@shell.command()
def suffix(ctx: typer.Context, value: str = typer.Argument("")) -> bool:
    """Set the suffix appended to the path of every request."""
    return _session(ctx).suffix(value)


@shell.command()
def mode(ctx: typer.Context, name: str | None = typer.Argument(None)) -> bool:
    """Show or switch the content mode."""
    return _session(ctx).mode(name)


@shell.command()
def sel(ctx: typer.Context, query: str = typer.Argument(..., help="Mode specific query")) -> bool:
    """Query the current output with the active mode's selector."""
    return _session(ctx).sel(query)


@shell.command()
def back(ctx: typer.Context, count: int = typer.Argument(1)) -> bool:
    """Step back through the response history."""
    return _session(ctx).back(count)


@shell.command()
def forward(ctx: typer.Context, count: int = typer.Argument(1)) -> bool:
    """Step forward through the response history."""
    return _session(ctx).forward(count)


@shell.command()
def first(ctx: typer.Context, adjust: int = typer.Argument(0)) -> bool:
    """Jump to the oldest response (plus an offset)."""
    return _session(ctx).first(adjust)


@shell.command()
def last(ctx: typer.Context, adjust: int = typer.Argument(0)) -> bool:
    """Jump to the latest response (minus an offset)."""
    return _session(ctx).last(adjust)


# -- payload ---------------------------------------------------------------


@shell.command()
def load(ctx: typer.Context, source: str | None = typer.Argument(None)) -> bool:
    """Copy a file (or stdin until EOF) into the payload."""
    return _session(ctx).load(source)


@shell.command()
def use(ctx: typer.Context, source: str | None = typer.Argument(None)) -> bool:
    """Use a file directly as the payload."""
    return _session(ctx).use(source)


# -- requests --------------------------------------------------------------


def _register_verb(method: str) -> None:
    def verb(
        ctx: typer.Context,
        target: str | None = typer.Argument(None, help="URL for this request only"),
        data: bool | None = typer.Option(
            None, "--data/--no-data", "-d/-n", help="Send (-d) or suppress (-n) the payload"
        ),
    ) -> bool:
        return _session(ctx).request(method, target, data)

    verb.__doc__ = f"Send a {method} request to the current URL."
    shell.command(name=method.lower())(verb)


for _method in ("GET", "HEAD", "POST", "PUT", "PATCH", "OPTIONS", "DELETE"):
    _register_verb(_method)


def command_names() -> list[str]:
    """Names of every console command, sorted."""
    names = []
    for info in shell.registered_commands:
        names.append(info.name or info.callback.__name__.replace("_", "-"))
    return sorted(names)
