"""Prompt rendering and REPL loop for ConsoleApp."""

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText


def status_style(code: int | None) -> str:
    """Prompt colour for a status code: red for errors, green for 2xx."""
    if code is not None and 400 <= code < 600:
        return "ansired"
    if code is not None and 200 <= code < 300:
        return "ansigreen"
    return "ansiyellow"


class RuntimeMixin:
    """Provide runtime loop and prompt formatting methods."""

    def prompt_text(self) -> str:
        """Plain prompt: ``<code>[ <pos>/<total>] [<url>] $ ``."""
        return "".join(text for _, text in self._build_prompt())

    def _build_prompt(self) -> FormattedText:
        """Build the status-aware prompt."""
        code = self.session.resultcode()
        position = self.session.history_label()
        rest = f" {position}" if position else ""
        return FormattedText(
            [
                (status_style(code), self.session.resultcode_label()),
                ("", f"{rest} [{self.session.url()}] $ "),
            ]
        )

    def run(self) -> None:
        """Start the REPL loop; the session is closed when it ends."""
        self._print_banner()
        self.running = True

        prompt_session = PromptSession(
            history=self.history.get_history(),
            completer=self.completer,
            complete_while_typing=False,
            enable_history_search=True,
        )

        try:
            while self.running:
                try:
                    line = prompt_session.prompt(self._build_prompt)
                    if not line.strip():
                        continue
                    self._process_input(line)
                except KeyboardInterrupt:
                    self.console.print("\n[dim]Use 'exit' to quit[/dim]")
                except EOFError:
                    break
        finally:
            self.session.close()
            self.console.print("[green]Goodbye![/green]")
