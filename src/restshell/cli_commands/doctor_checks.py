"""Individual health-check functions for ``restshell doctor``."""

from __future__ import annotations

import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from restshell.config import get_default_mode, get_tool_binaries, get_transport_kind
from restshell.modules.modes import (
    EXTERNAL_TOOLS,
    JSON_TOOL,
    ToolRunner,
    check_tool_availability,
    create_default_modes,
)
from restshell.modules.transport import TRANSPORT_CHOICES

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class CheckResult:
    """Outcome of a single diagnostic check."""

    name: str
    status: str  # "pass", "fail", "warn"
    message: str
    fix: str = ""


# what each optional tool enables, shown when it is missing
TOOL_ROLES: dict[str, str] = {
    "curl": "requests fall back to the built-in httpx client",
    "jq": "json mode pretty printing, payload programs and sel",
    "xmllint": "xml mode pretty printing and xpath sel",
}


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_python_version() -> CheckResult:
    """Verify Python >= 3.12."""
    v = sys.version_info
    ver = f"{v.major}.{v.minor}.{v.micro}"
    if (v.major, v.minor) >= (3, 12):
        return CheckResult("Python version", "pass", f"Python {ver}")
    return CheckResult(
        "Python version", "fail", f"Python {ver} (requires >= 3.12)", fix="Install Python 3.12+"
    )


def check_external_tools(binaries: dict[str, str] | None = None) -> list[CheckResult]:
    """One result per external tool; a missing tool is a warning, never a failure."""
    binaries = get_tool_binaries() if binaries is None else binaries
    status = check_tool_availability(binaries)
    results: list[CheckResult] = []
    for name in sorted(EXTERNAL_TOOLS):
        binary = binaries.get(name) or EXTERNAL_TOOLS[name]["binary"]
        if status.get(name):
            results.append(CheckResult(name, "pass", f"{name}: {binary}"))
        else:
            results.append(
                CheckResult(
                    name,
                    "warn",
                    f"{name} missing: {TOOL_ROLES.get(name, 'optional')}",
                    fix=f"Install: {EXTERNAL_TOOLS[name]['install']}",
                )
            )
    return results


def check_json_tool(runner: ToolRunner | None = None) -> CheckResult:
    """Check ``python -m json.tool`` the way json mode does without jq."""
    runner = runner or ToolRunner(Path(tempfile.gettempdir()))
    if runner.accepts(JSON_TOOL, b"{}"):
        return CheckResult("json.tool", "pass", "python json.tool: available")
    return CheckResult(
        "json.tool",
        "warn",
        "python json.tool unavailable, json pretty printing needs jq",
    )


def check_configuration() -> list[CheckResult]:
    """Validate the configured transport and default mode."""
    results: list[CheckResult] = []

    kind = get_transport_kind()
    if kind in TRANSPORT_CHOICES:
        results.append(CheckResult("Transport", "pass", f"Transport: {kind}"))
    else:
        results.append(
            CheckResult(
                "Transport",
                "fail",
                f"Unknown transport '{kind}'",
                fix=f"Set RESTSHELL_TRANSPORT to one of: {', '.join(TRANSPORT_CHOICES)}",
            )
        )

    mode = get_default_mode()
    names = sorted(m.name for m in create_default_modes())
    if mode in names:
        results.append(CheckResult("Default mode", "pass", f"Default mode: {mode}"))
    else:
        results.append(
            CheckResult(
                "Default mode",
                "fail",
                f"Unknown default mode '{mode}'",
                fix=f"Set RESTSHELL_DEFAULT_MODE to one of: {', '.join(names)}",
            )
        )
    return results
