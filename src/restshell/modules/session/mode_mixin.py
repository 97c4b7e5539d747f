"""Mode switching and selection commands for RestSession."""

import logging

from restshell.errors import ToolError, ToolUnavailable, UsageError

from .base import command

logger = logging.getLogger(__name__)


class ModeMixin:
    """Provide mode and sel."""

    @command
    def mode(self, name: str | None = None) -> bool:
        if not name:
            self.info(f"mode: {self.modes.active}")
            return True
        self.modes.switch_to(name)
        return True

    @command
    def sel(self, query: str) -> bool:
        """Run the active mode's query against the current output."""
        select = self.modes.bindings.select
        if select is None:
            raise UsageError(f"sel: not available in mode '{self.modes.active}'")
        try:
            selected = select(query, self.workspace.read_output())
        except (ToolError, ToolUnavailable) as exc:
            logger.debug("select %r failed: %s", query, exc)
            self.error(str(exc))
            return False
        self.output.write(selected.encode())
        self.output.flush()
        return True
