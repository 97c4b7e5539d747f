"""Help and banner behavior for ConsoleApp."""

from rich.panel import Panel

from .banner import BANNER_TEXT


class HelpMixin:
    """Banner, topic list and topic panels for the ``help`` built-in."""

    def _print_banner(self) -> None:
        self.console.print(Panel(BANNER_TEXT, border_style="green"))

    def _resolve_help_topic(self, topic: str) -> str | None:
        """A topic name, or a command name that belongs to one."""
        key = topic.strip().lower()
        key = self.HELP_TOPIC_ALIASES.get(key, key)
        return key if key in self.HELP_TOPICS else None

    def _print_help_topics(self) -> None:
        self.console.print(f"[dim]Help topics:[/dim] {', '.join(sorted(self.HELP_TOPICS))}")
        self.console.print("[dim]Use: help <topic> or <command> --help[/dim]")

    def _print_help_topic(self, topic: str) -> None:
        key = self._resolve_help_topic(topic)
        if key is None:
            self.console.print(f"Unknown help topic: {topic}", style="yellow", markup=False)
            self._print_help_topics()
            return
        self.console.print(Panel(self.HELP_TOPICS[key], title=f"Help: {key}", border_style="cyan"))
