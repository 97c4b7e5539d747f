"""Test configuration and fixtures for restshell."""

import io
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from rich.console import Console

from restshell.errors import ToolError, ToolUnavailable
from restshell.modules.session import RestSession
from restshell.modules.transport import RequestDescriptor, Transport, TransportResult


class TerminalInput(io.BytesIO):
    """stdin stand-in that reports being an interactive terminal."""

    def isatty(self) -> bool:
        return True


class FakeTools:
    """ToolRunner stand-in: ``handlers`` map tool names to fake behaviour."""

    def __init__(
        self,
        installed: tuple[str, ...] = (),
        handlers: dict[str, Callable[..., bytes]] | None = None,
        accepts_ok: bool = True,
    ) -> None:
        self.installed = set(installed)
        self.handlers = handlers or {}
        self.accepts_ok = accepts_ok
        self.calls: list[tuple[str, list[str], tuple[bytes, ...]]] = []

    def available(self, name: str) -> bool:
        return name in self.installed

    def accepts(self, name: str, sample: bytes) -> bool:
        return self.accepts_ok

    def run(self, name: str, args: list[str], *payloads: bytes) -> bytes:
        self.calls.append((name, list(args), payloads))
        if name not in self.installed:
            raise ToolUnavailable(f"{name} unavailable")
        handler = self.handlers.get(name)
        if handler is None:
            return payloads[0] if payloads else b""
        return handler(list(args), *payloads)


def failing_tool(args: list[str], *payloads: bytes) -> bytes:
    raise ToolError("tool failed", 5, "parse error")


class FakeTransport(Transport):
    """Records descriptors and answers from a queue of canned responses."""

    name = "fake"

    def __init__(self) -> None:
        self.responses: list[tuple[int | None, bytes, int]] = []
        self.sent: list[RequestDescriptor] = []
        self.payloads: list[bytes | None] = []

    def queue(self, body: bytes = b"", status: int | None = 200, exit_code: int = 0) -> None:
        self.responses.append((status, body, exit_code))

    def send(self, descriptor: RequestDescriptor) -> TransportResult:
        self.sent.append(descriptor)
        if descriptor.payload_path is not None:
            self.payloads.append(descriptor.payload_path.read_bytes())
        else:
            self.payloads.append(None)
        status, body, exit_code = self.responses.pop(0) if self.responses else (200, b"", 0)
        header = f"HTTP/1.1 {status} Status\r\n\r\n".encode() if status else b""
        descriptor.header_path.write_bytes(header)
        descriptor.body_path.write_bytes(body)
        return TransportResult(exit_code=exit_code, header_blob=header, body=body)


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path: Path) -> Path:
    """Keep ~/.restshell and RESTSHELL_* settings out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in (
        "RESTSHELL_DEFAULT_MODE",
        "RESTSHELL_SSL_INSECURE",
        "RESTSHELL_COOKIE_JAR",
        "RESTSHELL_TRANSPORT",
        "RESTSHELL_CURL",
        "RESTSHELL_JQ",
        "RESTSHELL_XMLLINT",
        "RESTSHELL_VERBOSE",
        "RESTSHELL_HISTORY_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def fake_tools() -> FakeTools:
    return FakeTools()


def make_session(
    base_dir: Path,
    transport: Transport,
    tools: FakeTools,
    stdin: io.BytesIO | None = None,
    prompter: Callable[[str, bool], str] | None = None,
    apply_defaults: bool = False,
) -> RestSession:
    return RestSession(
        transport=transport,
        tools=tools,
        console=Console(file=io.StringIO(), width=200),
        err_console=Console(file=io.StringIO(), width=200),
        output=io.BytesIO(),
        stdin=stdin if stdin is not None else TerminalInput(),
        prompter=prompter,
        base_dir=base_dir,
        apply_defaults=apply_defaults,
    )


@pytest.fixture
def session(temp_dir: Path, fake_transport: FakeTransport, fake_tools: FakeTools) -> Generator[RestSession, None, None]:
    """A session in mode ``none`` with a fake transport and fake tools."""
    rest = make_session(temp_dir, fake_transport, fake_tools)
    yield rest
    rest.close()


def printed(session: RestSession) -> str:
    """Messages written to the session's console."""
    return session.console.file.getvalue()


def errors(session: RestSession) -> str:
    return session.err_console.file.getvalue()


def output(session: RestSession) -> bytes:
    """Response data written to the operator stream."""
    return session.output.getvalue()
