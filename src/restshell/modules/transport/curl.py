"""curl-backed HTTP client collaborator."""

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from restshell.utils.debug import debug_request

from .base import RequestDescriptor, Transport, TransportResult

logger = logging.getLogger(__name__)

# exit status a shell reports for a command it cannot run
COMMAND_NOT_FOUND = 127


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return b""


class CurlTransport(Transport):
    """Run curl with the flattened descriptor; curl writes both files itself."""

    name = "curl"

    def __init__(
        self,
        binary: str = "curl",
        runner: Callable[..., subprocess.CompletedProcess] | None = None,
    ) -> None:
        self.binary = binary
        self._runner = runner or subprocess.run

    def command(self, descriptor: RequestDescriptor) -> list[str]:
        return [self.binary, *descriptor.arguments()]

    def send(self, descriptor: RequestDescriptor) -> TransportResult:
        command = self.command(descriptor)
        debug_request(command, self.name)
        try:
            completed = self._runner(command, stdin=subprocess.DEVNULL)
            exit_code = completed.returncode
        except OSError as exc:
            logger.error("could not run %s: %s", self.binary, exc)
            exit_code = COMMAND_NOT_FOUND
        return TransportResult(
            exit_code=exit_code,
            header_blob=_read(descriptor.header_path),
            body=_read(descriptor.body_path),
        )
