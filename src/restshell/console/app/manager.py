"""ConsoleApp class definition."""

import typer
from rich.console import Console

from restshell.console.commands import command_names, shell
from restshell.console.completer import CommandCompleter
from restshell.console.history import HistoryManager
from restshell.console.router import InputRouter
from restshell.modules.session import RestSession

from .command_mixin import CommandMixin
from .help_data import HELP_TOPIC_ALIASES, HELP_TOPICS
from .help_mixin import HelpMixin
from .runtime_mixin import RuntimeMixin


class ConsoleApp(HelpMixin, CommandMixin, RuntimeMixin):
    """Interactive console driving one RestSession."""

    HELP_TOPICS: dict[str, str] = HELP_TOPICS
    HELP_TOPIC_ALIASES: dict[str, str] = HELP_TOPIC_ALIASES

    def __init__(
        self,
        session: RestSession | None = None,
        console: Console | None = None,
        history: HistoryManager | None = None,
    ) -> None:
        self.console = console or Console()
        self.session = session or RestSession(console=self.console)
        self.history = history or HistoryManager()
        self.completer = CommandCompleter(self.session.modes.names)
        self.router = InputRouter()
        self.command = typer.main.get_command(shell)
        self.command_names = set(command_names())
        self.running = False
