"""Exception hierarchy for restshell."""

from typing import Any


class RestShellError(Exception):
    """Base exception for all restshell errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class UsageError(RestShellError):
    """Malformed command arguments, unknown mode names, conflicting flags."""


class TransportFailure(RestShellError):
    """The HTTP client collaborator could not be invoked at all."""


class ToolUnavailable(RestShellError):
    """An optional filter/query tool is not installed."""


class ToolError(RestShellError):
    """An optional filter/query tool exited with a non-zero status."""

    def __init__(self, message: str, returncode: int, stderr: str = "") -> None:
        super().__init__(message, {"returncode": returncode} if returncode else None)
        self.returncode = returncode
        self.stderr = stderr


class HistoryBoundsError(RestShellError):
    """History navigation requested outside the recorded range."""
