"""Tab completion for restshell console commands and arguments."""

from collections.abc import Callable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from restshell.console.commands import command_names
from restshell.console.router import BUILTINS

VERB_OPTIONS = ["-d", "-n", "--data", "--no-data"]


class CommandCompleter(Completer):
    """Complete command names, their flags and mode names."""

    OPTIONS: dict[str, list[str]] = {
        "header": ["-d"],
        "accept": ["-d"],
        "authorization": ["-d"],
        "content-type": ["-d"],
        "cookie": ["-d"],
        "user-agent": ["-d"],
        "get": VERB_OPTIONS,
        "head": VERB_OPTIONS,
        "post": VERB_OPTIONS,
        "put": VERB_OPTIONS,
        "patch": VERB_OPTIONS,
        "options": VERB_OPTIONS,
        "delete": VERB_OPTIONS,
    }

    TOGGLE_VALUES = ["on", "off"]
    ACCEPT_VALUES = ["*/*", "application/json", "text/plain", "text/xml"]

    def __init__(self, mode_names: Callable[[], list[str]] | None = None) -> None:
        self._mode_names = mode_names or (lambda: [])
        self.commands = sorted(set(command_names()) | (BUILTINS - {"q", "cls"}))

    def _values_for(self, command: str) -> list[str]:
        if command == "mode":
            return self._mode_names()
        if command in ("ssl-insecure", "cookie-jar"):
            return self.TOGGLE_VALUES
        if command in ("accept", "content-type"):
            return self.ACCEPT_VALUES
        return []

    def get_completions(self, document: Document, complete_event):  # noqa: D401
        """Yield completions for the current input."""
        text = document.text_before_cursor
        words = text.split()
        if text.endswith(" ") or not words:
            words.append("")

        last_word = words[-1]
        start_position = -len(last_word)

        if len(words) == 1:
            for cmd in self.commands:
                if cmd.startswith(last_word.lower()):
                    yield Completion(cmd, start_position=start_position)
            return

        first = words[0].lower()
        if last_word.startswith("-"):
            used = set(words[1:-1])
            for opt in self.OPTIONS.get(first, []):
                if opt not in used and opt.startswith(last_word):
                    yield Completion(opt, start_position=start_position)
            return

        if len(words) == 2:
            for value in self._values_for(first):
                if value.startswith(last_word):
                    yield Completion(value, start_position=start_position)
