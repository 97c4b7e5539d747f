"""HTTP verb, payload and status commands for RestSession."""

import logging
from pathlib import Path

from restshell.errors import UsageError
from restshell.modules.executor import PayloadPolicy, parse_status_code

from .base import command

logger = logging.getLogger(__name__)


class RequestMixin:
    """Provide the HTTP verbs plus load, use, files and resultcode."""

    def _piped_stdin(self):
        """The stdin stream when it is not a terminal, else None."""
        isatty = getattr(self.stdin, "isatty", None)
        if isatty is not None and isatty():
            return None
        return self.stdin

    @command
    def request(self, method: str, target: str | None = None, data: bool | None = None) -> bool:
        """Send ``method`` to the current URL, or to ``target`` for this call only.

        ``data`` forces (True) or suppresses (False) the payload; None uses
        the verb's default.
        """
        if data is None:
            policy = None
        else:
            policy = PayloadPolicy.DATA if data else PayloadPolicy.NONE
        stdin = self._piped_stdin() if policy is not PayloadPolicy.NONE else None
        result = self.executor.execute(
            method,
            self.url_state,
            url_delta=target,
            payload_policy=policy,
            stdin=stdin,
        )
        self.last_result = result
        if result.exit_code:
            logger.debug("transport exit code %s for %s", result.exit_code, result.url)
        return result.success

    def get(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("GET", target, data)

    def head(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("HEAD", target, data)

    def post(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("POST", target, data)

    def put(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("PUT", target, data)

    def patch(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("PATCH", target, data)

    def options(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("OPTIONS", target, data)

    def delete(self, target: str | None = None, data: bool | None = None) -> bool:
        return self.request("DELETE", target, data)

    @command
    def load(self, source: str | None = None) -> bool:
        """Fill the payload from a file, or from stdin when no file is given."""
        if source:
            path = Path(source).expanduser()
            if not path.is_file():
                raise UsageError(f"load: {source}: no such file")
            self.workspace.load(source=path)
        else:
            self.workspace.load(stream=self.stdin)
        return True

    @command
    def use(self, source: str | None = None) -> bool:
        """Use ``source`` itself as the payload file."""
        if not source:
            raise UsageError("Usage: use <file>")
        self.workspace.use(Path(source).expanduser())
        return True

    def files(self) -> bool:
        for label, path in self.workspace.listing():
            self.info(f"{label}: {path}")
        return True

    def resultcode(self) -> int | None:
        """Status code of the last response, or None when there is none."""
        return parse_status_code(self.workspace.header.read_bytes())

    def resultcode_label(self) -> str:
        code = self.resultcode()
        return "---" if code is None else str(code)
