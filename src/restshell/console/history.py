"""Persistent command history for the restshell console."""

from pathlib import Path

from prompt_toolkit.history import FileHistory

from restshell.config import get_history_file


class HistoryManager:
    """Manages persistent command history for the console."""

    def __init__(self, history_file: Path | None = None) -> None:
        self.history_file = history_file or get_history_file()
        self.history_file.parent.mkdir(parents=True, exist_ok=True)
        self._file_history = FileHistory(str(self.history_file))

    def get_history(self) -> FileHistory:
        """Return the FileHistory instance for use with PromptSession."""
        return self._file_history

    def get_recent(self, n: int = 20) -> list[str]:
        """Get the last n commands from history for display.

        FileHistory stores entries prefixed with '+ ' and separated by
        blank lines.
        """
        lines: list[str] = []
        try:
            if not self.history_file.exists():
                return []
            for line in self.history_file.read_text().splitlines():
                if line.startswith("+"):
                    lines.append(line[1:].strip())
            return lines[-n:]
        except OSError:
            return []
