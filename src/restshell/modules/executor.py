"""Request execution: build, send, filter, record and classify."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from restshell.errors import ToolError, ToolUnavailable, UsageError
from restshell.modules.history import HistoryStore
from restshell.modules.modes import ModeRegistry, plain_filter
from restshell.modules.options import OptionStore
from restshell.modules.transport import RequestDescriptor, Transport
from restshell.modules.urlstate import URLState, resolve
from restshell.modules.workspace import Workspace

logger = logging.getLogger(__name__)

# returned for a transported response with status >= 400 (curl --fail's code)
HTTP_ERROR_RETURNCODE = 22

_STATUS_LINE = re.compile(r"^(?:HTTP/2(?:\.0)? |HTTP/1\.|HTTP/0\.9 )")


class PayloadPolicy(Enum):
    """Whether a request sends a body."""

    NONE = "none"
    DATA = "data"


DATA_METHODS = frozenset({"POST", "PUT", "PATCH"})


def default_payload_policy(method: str) -> PayloadPolicy:
    return PayloadPolicy.DATA if method.upper() in DATA_METHODS else PayloadPolicy.NONE


def parse_status_code(header_blob: bytes) -> int | None:
    """Status code from the first line of a header dump, or None.

    Only the first line is read, so an interim ``100 Continue`` in front of
    the final status is reported as 100.
    """
    first_line = header_blob.split(b"\n", 1)[0].decode("latin-1").rstrip("\r\n")
    if not _STATUS_LINE.match(first_line):
        return None
    fields = first_line.split(" ")
    if len(fields) < 2:
        return None
    try:
        return int(fields[1])
    except ValueError:
        return None


def classify(exit_code: int, status_code: int | None) -> int:
    """Return code for a request: client exit code, 22 for HTTP errors, else 0."""
    if exit_code > 0:
        return exit_code
    if status_code is not None and status_code >= 400:
        return HTTP_ERROR_RETURNCODE
    return 0


@dataclass
class ExecutionResult:
    """Outcome of one request as seen by the operator."""

    output: bytes
    status_code: int | None
    exit_code: int
    returncode: int
    url: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class RequestExecutor:
    """Glue between options, URL state, the active mode, transport and history."""

    def __init__(
        self,
        options: OptionStore,
        modes: ModeRegistry,
        history: HistoryStore,
        workspace: Workspace,
        transport: Transport,
        emit_output: Callable[[bytes], None],
    ) -> None:
        self.options = options
        self.modes = modes
        self.history = history
        self.workspace = workspace
        self.transport = transport
        self._emit_output = emit_output

    def build_descriptor(
        self,
        method: str,
        state: URLState,
        payload: bytes | None = None,
    ) -> RequestDescriptor:
        payload_path = None
        if payload is not None:
            self.workspace.staged_payload.write_bytes(payload)
            payload_path = self.workspace.staged_payload
        return RequestDescriptor(
            method=method.upper(),
            url=state.request_url(),
            header_path=self.workspace.header,
            body_path=self.workspace.raw_output,
            options=list(self.options.fragments()),
            payload_path=payload_path,
        )

    def read_payload(self, stdin: BinaryIO | None) -> bytes:
        """Payload from a piped stdin, else the payload file, through the input filter.

        Raises:
            UsageError: the payload file cannot be read
        """
        if stdin is not None:
            source = stdin.read()
            self.workspace.raw_input.write_bytes(source)
        else:
            try:
                source = self.workspace.payload.read_bytes()
            except OSError as exc:
                raise UsageError(f"payload {self.workspace.payload}: {exc.strerror}") from exc

        request_filter = self.modes.bindings.request_filter
        if request_filter is None:
            return source
        try:
            return request_filter(source, self.workspace.read_output())
        except (ToolError, ToolUnavailable) as exc:
            logger.warning("input filter failed, sending payload unfiltered: %s", exc)
            return source

    def execute(
        self,
        method: str,
        state: URLState,
        url_delta: str | None = None,
        payload_policy: PayloadPolicy | None = None,
        stdin: BinaryIO | None = None,
    ) -> ExecutionResult:
        """Run one request.

        ``url_delta`` is resolved against ``state`` for this call only; the
        caller's state is never changed. ``stdin`` is passed when input is
        piped rather than interactive.
        """
        if url_delta:
            state = resolve(state, url_delta)
        if payload_policy is None:
            payload_policy = default_payload_policy(method)

        payload = self.read_payload(stdin) if payload_policy is PayloadPolicy.DATA else None
        descriptor = self.build_descriptor(method, state, payload)

        self.workspace.reset_response_files()
        result = self.transport.send(descriptor)

        try:
            output = self.modes.bindings.response_filter(result.body)
        except (ToolError, ToolUnavailable) as exc:
            logger.warning("output filter failed, using plain output: %s", exc)
            output = plain_filter(result.body)
        self._emit_output(output)
        self.history.append(output)

        status_code = parse_status_code(result.header_blob)
        returncode = classify(result.exit_code, status_code)
        if returncode:
            logger.debug(
                "%s %s failed: exit=%s status=%s",
                descriptor.method,
                descriptor.url,
                result.exit_code,
                status_code,
            )
        return ExecutionResult(
            output=output,
            status_code=status_code,
            exit_code=result.exit_code,
            returncode=returncode,
            url=descriptor.url,
        )
