"""Input splitting for the console."""

import shlex

BUILTINS = {"help", "exit", "quit", "q", "files", "url", "clear", "cls"}


class InputRouter:
    """Splits a prompt line into argv and tells built-ins from commands."""

    def split(self, line: str) -> list[str]:
        """Shell-like split; an unbalanced quote falls back to whitespace."""
        try:
            return shlex.split(line)
        except ValueError:
            return line.split()

    def route(self, line: str) -> tuple[str, list[str]]:
        """
        Route a line to a built-in or a session command.

        Returns:
            ("builtin", ["help", "modes"]) or
            ("command", ["get", "-d", "/users"])
        """
        argv = self.split(line.strip())
        if not argv:
            return ("command", [])
        if argv[0].lower() in BUILTINS:
            return ("builtin", argv)
        return ("command", argv)
