"""Debug utilities for request and tool visibility.

Thread-safe debug output with rich formatting for console sessions.
"""

import json
import shlex
import threading
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

# Thread-local storage for debug state
_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread/session."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread/session."""
    return getattr(_debug_state, "enabled", False)


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (request, tool, mode, config)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            try:
                json_str = json.dumps(value, indent=2)
                syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
                console.print(f"  {key}:", style="dim", markup=False)
                console.print(syntax)
            except (TypeError, ValueError):
                console.print(f"  {key}: {value}", style="dim", markup=False)
        elif isinstance(value, list):
            console.print(f"  {key}: {', '.join(str(v) for v in value)}", style="dim", markup=False)
        elif isinstance(value, str) and len(value) > 100:
            console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim", markup=False)
        else:
            console.print(f"  {key}: {value}", style="dim", markup=False)


def debug_request(argv: list[str], transport: str) -> None:
    """Log an outgoing request descriptor in debug mode."""
    if not is_debug_enabled():
        return
    debug_print(
        "request",
        f"→ {transport}",
        Command=" ".join(shlex.quote(part) for part in argv),
    )


def debug_tool(
    argv: list[str],
    returncode: int | None = None,
    elapsed: float | None = None,
) -> None:
    """Log a filter/query tool invocation in debug mode.

    Args:
        argv: Command line of the tool
        returncode: Exit status once the tool has finished
        elapsed: Time elapsed in seconds
    """
    if not is_debug_enabled():
        return
    command = " ".join(shlex.quote(part) for part in argv)
    if returncode is None:
        debug_print("tool", f"run {command}")
    else:
        debug_print(
            "tool",
            f"done {command} +{elapsed:.2f}s" if elapsed else f"done {command}",
            Exit=returncode,
        )
