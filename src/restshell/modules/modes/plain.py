"""Plain text mode."""

import re

from restshell.errors import UsageError

from .base import Mode, ModeBindings, ModeContext


def plain_filter(data: bytes) -> bytes:
    """Make sure the output ends with exactly one newline."""
    if not data:
        return data
    return data.rstrip(b"\r\n") + b"\n"


def plain_select(query: str, output: bytes) -> str:
    """Return the lines of ``output`` matching the regular expression ``query``."""
    try:
        pattern = re.compile(query)
    except re.error as exc:
        raise UsageError(f"sel: invalid pattern: {exc}") from exc
    text = output.decode(errors="replace")
    return "".join(
        line for line in text.splitlines(keepends=True) if pattern.search(line.rstrip("\r\n"))
    )


class PlainMode(Mode):
    """No formatting; ``sel`` greps the previous output."""

    name = "plain"

    def activate(self, context: ModeContext) -> ModeBindings:
        context.options.set_header("Content-Type", "text/plain")
        context.options.set_header("Accept", "text/plain,*/*")
        return ModeBindings(response_filter=plain_filter, select=plain_select)
