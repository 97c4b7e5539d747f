"""Tests for the per-session workspace files."""

import io
from pathlib import Path

from restshell.modules.workspace import WORKSPACE_FILES, Workspace


class TestWorkspace:
    def test_files_created(self, temp_dir: Path):
        workspace = Workspace(temp_dir)
        for name in WORKSPACE_FILES:
            path = getattr(workspace, name)
            assert path.is_file()
            assert path.parent == workspace.root
        assert workspace.scratch.is_dir()
        assert workspace.root.name.startswith("restshell.")

    def test_load_file_and_stream(self, temp_dir: Path):
        workspace = Workspace(temp_dir)
        source = temp_dir / "body.json"
        source.write_bytes(b"{}")
        workspace.load(source=source)
        assert workspace.payload.read_bytes() == b"{}"
        workspace.load(stream=io.BytesIO(b"streamed"))
        assert workspace.payload.read_bytes() == b"streamed"

    def test_use_repoints_payload(self, temp_dir: Path):
        workspace = Workspace(temp_dir)
        own = temp_dir / "mine.txt"
        own.write_bytes(b"x")
        workspace.use(own)
        assert workspace.payload == own.resolve()
        assert workspace.listing()[0] == ("Payload", own.resolve())

    def test_reset_response_files(self, temp_dir: Path):
        workspace = Workspace(temp_dir)
        workspace.header.write_bytes(b"HTTP/1.1 200 OK\r\n")
        workspace.raw_output.write_bytes(b"x")
        workspace.reset_response_files()
        assert workspace.header.read_bytes() == b""
        assert workspace.raw_output.read_bytes() == b""

    def test_cleanup_keeps_used_payload(self, temp_dir: Path):
        workspace = Workspace(temp_dir)
        own = temp_dir / "mine.txt"
        own.write_bytes(b"x")
        workspace.use(own)
        workspace.cleanup()
        assert not workspace.root.exists()
        assert own.exists()
