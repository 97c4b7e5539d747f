"""Main RestSession class."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from rich.console import Console

from restshell.config import (
    get_cookie_jar_setting,
    get_default_mode,
    get_ssl_insecure_setting,
    get_tool_binaries,
    get_transport_kind,
)
from restshell.modules.executor import ExecutionResult, RequestExecutor
from restshell.modules.history import HistoryStore
from restshell.modules.modes import Mode, ModeContext, ModeRegistry, ToolRunner
from restshell.modules.options import OptionStore
from restshell.modules.transport import Transport, create_transport
from restshell.modules.urlstate import URLState
from restshell.modules.workspace import Workspace

from .base import default_prompter
from .history_mixin import HistoryMixin
from .mode_mixin import ModeMixin
from .navigation_mixin import NavigationMixin
from .options_mixin import OptionsMixin
from .request_mixin import RequestMixin


class RestSession(OptionsMixin, NavigationMixin, ModeMixin, HistoryMixin, RequestMixin):
    """Interactive REST session: URL, options, mode, history and requests.

    Every public command returns ``True`` on success and ``False`` on
    failure; failures are reported but never raised.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        tools: ToolRunner | None = None,
        modes: list[Mode] | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
        output: BinaryIO | None = None,
        stdin: BinaryIO | None = None,
        prompter: Callable[[str, bool], str] | None = None,
        base_dir: Path | None = None,
        apply_defaults: bool = True,
    ) -> None:
        self.workspace = Workspace(base_dir)
        self.option_store = OptionStore()
        self.url_state = URLState()
        self.history = HistoryStore()
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.output = output if output is not None else sys.stdout.buffer
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.prompter = prompter or default_prompter
        self.tools = tools or ToolRunner(self.workspace.scratch, get_tool_binaries())
        self.mode_context = ModeContext(self.option_store, self.tools, warn=self.warn)
        self.modes = ModeRegistry(self.mode_context, modes)
        if transport is None:
            transport = create_transport(
                get_transport_kind(), get_tool_binaries().get("curl", "curl")
            )
        self.executor = RequestExecutor(
            self.option_store,
            self.modes,
            self.history,
            self.workspace,
            transport,
            emit_output=self._surface_output,
        )
        # hooks: called with every new output / decides whether it is printed
        self.on_output: Callable[[bytes], None] = lambda data: None
        self.stdout_policy: Callable[[], bool] = lambda: True
        self.last_result: ExecutionResult | None = None
        self.closed = False

        if apply_defaults:
            self.apply_default_settings()

    # -- reporting -----------------------------------------------------

    def info(self, message: str) -> None:
        self.console.print(message, markup=False)

    def warn(self, message: str) -> None:
        self.err_console.print(message, style="yellow", markup=False)

    def error(self, message: str) -> None:
        self.err_console.print(message, style="red", markup=False)

    def _surface_output(self, data: bytes) -> None:
        """Make ``data`` the current output, notify and maybe print it."""
        self.workspace.write_output(data)
        self.on_output(data)
        if self.stdout_policy():
            self.output.write(data)
            self.output.flush()

    # -- lifecycle -----------------------------------------------------

    def apply_default_settings(self) -> None:
        self.mode(get_default_mode())
        self.ssl_insecure(get_ssl_insecure_setting())
        self.cookie_jar(get_cookie_jar_setting())

    def close(self) -> None:
        """Leave the active mode and remove the workspace files."""
        if self.closed:
            return
        self.closed = True
        try:
            self.modes.shutdown()
        finally:
            self.workspace.cleanup()

    def __enter__(self) -> "RestSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
