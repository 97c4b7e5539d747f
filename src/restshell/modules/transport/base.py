"""Request descriptor and the HTTP client collaborator contract."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from restshell import __version__

DEFAULT_USER_AGENT = f"restshell/{__version__}"

Argument = tuple[str, str | None]


@dataclass
class RequestDescriptor:
    """Everything the HTTP client needs for one request.

    ``options`` holds the option fragments in store order; ``arguments``
    flattens the whole descriptor into curl's order-sensitive argv.
    """

    method: str
    url: str
    header_path: Path
    body_path: Path
    options: list[Argument] = field(default_factory=list)
    payload_path: Path | None = None
    user_agent: str = DEFAULT_USER_AGENT

    def method_arguments(self) -> list[Argument]:
        method = self.method.upper()
        if method == "GET":
            return []
        if method == "HEAD":
            return [("-I", None)]
        return [("-X", method)]

    def pairs(self) -> list[Argument]:
        pairs: list[Argument] = [
            ("-s", None),
            ("-A", self.user_agent),
            ("-D", str(self.header_path)),
        ]
        pairs.extend(self.options)
        pairs.extend(self.method_arguments())
        if self.payload_path is not None:
            pairs.append(("--data-binary", f"@{self.payload_path}"))
        pairs.append(("-o", str(self.body_path)))
        return pairs

    def arguments(self) -> list[str]:
        argv: list[str] = []
        for flag, value in self.pairs():
            argv.append(flag)
            if value is not None:
                argv.append(value)
        argv.append(self.url)
        return argv


@dataclass
class TransportResult:
    """Client exit status plus the raw header blob and body."""

    exit_code: int
    header_blob: bytes = b""
    body: bytes = b""


class Transport(ABC):
    """HTTP client collaborator."""

    name: str

    @abstractmethod
    def send(self, descriptor: RequestDescriptor) -> TransportResult:
        """Perform the request, write header and body files, return the result."""
