"""Transient per-session files shared with external collaborators."""

import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO

WORKSPACE_FILES = (
    "payload",
    "staged_payload",
    "raw_input",
    "output",
    "raw_output",
    "cookie_jar",
    "header",
)


class Workspace:
    """A temporary directory holding the payload, output and header files.

    ``payload`` may be repointed at a user file with :meth:`use`; every other
    file lives inside the directory and disappears on :meth:`cleanup`.
    """

    payload: Path
    staged_payload: Path
    raw_input: Path
    output: Path
    raw_output: Path
    cookie_jar: Path
    header: Path

    def __init__(self, base_dir: Path | None = None) -> None:
        self.root = Path(tempfile.mkdtemp(prefix="restshell.", dir=base_dir))
        for name in WORKSPACE_FILES:
            path = self.root / name
            path.touch()
            setattr(self, name, path)
        self.scratch = self.root / "scratch"
        self.scratch.mkdir()

    def load(self, source: Path | None = None, stream: BinaryIO | None = None) -> None:
        """Copy a file, or everything readable from ``stream``, into the payload."""
        if source is not None:
            shutil.copyfile(source, self.payload)
        elif stream is not None:
            self.payload.write_bytes(stream.read())

    def use(self, path: Path) -> None:
        """Make ``path`` the payload file from now on."""
        self.payload = path.resolve()

    def read_output(self) -> bytes:
        return self.output.read_bytes()

    def write_output(self, data: bytes) -> None:
        self.output.write_bytes(data)

    def reset_response_files(self) -> None:
        self.header.write_bytes(b"")
        self.raw_output.write_bytes(b"")

    def listing(self) -> list[tuple[str, Path]]:
        return [
            ("Payload", self.payload),
            ("Output", self.output),
            ("HTTP Status", self.header),
        ]

    def cleanup(self) -> None:
        shutil.rmtree(self.root, ignore_errors=True)
