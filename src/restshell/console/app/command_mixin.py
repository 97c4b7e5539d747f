"""Built-in command handling and input dispatch for ConsoleApp."""

import logging

import click

logger = logging.getLogger(__name__)


class CommandMixin:
    """Provide built-in command and routing methods."""

    def _handle_builtin(self, argv: list[str]) -> bool:
        """Handle built-in commands. Returns True if handled."""
        name = argv[0].lower()
        if name == "help":
            topic = " ".join(argv[1:]).strip()
            if not topic:
                self._print_banner()
            elif topic in ("topic", "topics", "list"):
                self._print_help_topics()
            elif topic.split()[0] in self.command_names:
                self._invoke_command([topic.split()[0], "--help"])
            else:
                self._print_help_topic(topic)
            return True

        if name in ("exit", "quit", "q"):
            self.running = False
            return True

        if name in ("clear", "cls"):
            self.console.clear()
            return True

        if name == "files":
            self.session.files()
            return True

        if name == "url":
            self.console.print(self.session.url(), markup=False, highlight=False)
            return True
        return False

    def _invoke_command(self, argv: list[str]) -> bool:
        """Run a session command through the console command table."""
        if not argv:
            return False
        try:
            result = self.command.main(
                args=argv,
                prog_name="restshell",
                obj=self.session,
                standalone_mode=False,
            )
        except click.ClickException as exc:
            self.console.print(exc.format_message(), style="red", markup=False)
            return False
        except click.exceptions.Abort:
            self.console.print("[dim]Aborted.[/dim]")
            return False
        logger.debug("%s -> %s", argv[0], result)
        return result is True

    def _process_input(self, line: str) -> bool:
        """Route a prompt line to a built-in or a session command."""
        dest, argv = self.router.route(line)
        if not argv:
            return False
        if dest == "builtin" and self._handle_builtin(argv):
            return True
        return self._invoke_command(argv)
