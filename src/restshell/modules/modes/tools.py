"""External filter/query tool registry and invocation."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

from restshell.errors import ToolError, ToolUnavailable
from restshell.utils.debug import debug_tool

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# External tool registry (binary name + install instructions)
# ---------------------------------------------------------------------------

EXTERNAL_TOOLS: dict[str, dict[str, str]] = {
    "curl": {"binary": "curl", "install": "sudo apt install curl"},
    "jq": {"binary": "jq", "install": "sudo apt install jq"},
    "xmllint": {"binary": "xmllint", "install": "sudo apt install libxml2-utils"},
}

JSON_TOOL = "json.tool"


def resolve_binary(name: str) -> str | None:
    """Return absolute path for a binary name when available."""
    return shutil.which(name)


def check_tool_availability(overrides: dict[str, str] | None = None) -> dict[str, bool]:
    """Return {tool_name: is_installed} for every known external tool."""
    overrides = overrides or {}
    return {
        name: resolve_binary(overrides.get(name) or info["binary"]) is not None
        for name, info in EXTERNAL_TOOLS.items()
    }


class ToolRunner:
    """Runs filter tools against payloads materialized as scratch files.

    Tools receive file paths appended to their argv and answer on stdout.
    """

    def __init__(
        self,
        scratch_dir: Path,
        binaries: dict[str, str] | None = None,
        runner: Callable[..., subprocess.CompletedProcess] | None = None,
    ) -> None:
        self.scratch_dir = scratch_dir
        self.binaries = dict(binaries or {})
        self._runner = runner or subprocess.run

    def command(self, name: str) -> list[str] | None:
        """Argv prefix for a registered tool, or None when not installed."""
        if name == JSON_TOOL:
            return [self.binaries.get(JSON_TOOL) or sys.executable, "-m", "json.tool"]
        binary = self.binaries.get(name) or EXTERNAL_TOOLS.get(name, {}).get("binary", name)
        path = resolve_binary(binary)
        return [path] if path else None

    def available(self, name: str) -> bool:
        return self.command(name) is not None

    def accepts(self, name: str, sample: bytes) -> bool:
        """Check a tool by feeding it ``sample`` on stdin."""
        prefix = self.command(name)
        if prefix is None:
            return False
        try:
            result = self._runner(prefix, input=sample, capture_output=True)
        except OSError:
            return False
        return result.returncode == 0

    def run(self, name: str, args: list[str], *payloads: bytes) -> bytes:
        """Run tool ``name`` with ``args`` followed by one path per payload.

        Raises:
            ToolUnavailable: the tool is not installed
            ToolError: the tool exited non-zero
        """
        prefix = self.command(name)
        if prefix is None:
            raise ToolUnavailable(f"{name} unavailable")

        paths: list[str] = []
        try:
            for payload in payloads:
                fd, path = tempfile.mkstemp(prefix=f"rest-{name}.", dir=self.scratch_dir)
                with os.fdopen(fd, "wb") as handle:
                    handle.write(payload)
                paths.append(path)

            argv = [*prefix, *args, *paths]
            debug_tool(argv)
            started = time.perf_counter()
            try:
                result = self._runner(argv, capture_output=True)
            except OSError as exc:
                raise ToolUnavailable(f"{name} could not be started: {exc}") from exc
            debug_tool(argv, result.returncode, time.perf_counter() - started)
        finally:
            for path in paths:
                Path(path).unlink(missing_ok=True)

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace") if result.stderr else ""
            logger.debug("%s exited with %s: %s", name, result.returncode, stderr.strip())
            raise ToolError(f"{name} failed", result.returncode, stderr)
        return result.stdout
