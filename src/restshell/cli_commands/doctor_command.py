"""``restshell doctor`` pre-flight health check command."""

from __future__ import annotations

import typer

from .shared import app, console

STATUS_ICONS = {
    "pass": "[green]✓[/green]",
    "fail": "[red]✗[/red]",
    "warn": "[yellow]![/yellow]",
}


@app.command()
def doctor() -> None:
    """Check the HTTP client, filter tools and configuration."""
    from .doctor_checks import (
        CheckResult,
        check_configuration,
        check_external_tools,
        check_json_tool,
        check_python_version,
    )

    console.print("\n[bold]restshell doctor[/bold]")
    console.print("─" * 36)
    console.print()

    results: list[CheckResult] = [check_python_version()]
    results.extend(check_external_tools())
    results.append(check_json_tool())
    results.extend(check_configuration())

    for r in results:
        icon = STATUS_ICONS.get(r.status, "?")
        console.print(f"  {icon} {r.message}")
        if r.fix and r.status in ("fail", "warn"):
            for line in r.fix.splitlines():
                console.print(f"    {line}")

    counts = {"pass": 0, "fail": 0, "warn": 0}
    for r in results:
        counts[r.status] = counts.get(r.status, 0) + 1

    console.print()
    console.print(
        f"  Summary: {counts['pass']} passed, {counts['warn']} warnings, {counts['fail']} failed"
    )
    console.print()

    if counts["fail"] > 0:
        raise typer.Exit(1)
