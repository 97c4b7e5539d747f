"""XML mode backed by xmllint."""

import logging

from restshell.errors import ToolError, ToolUnavailable

from .base import Mode, ModeBindings, ModeContext
from .plain import plain_filter

logger = logging.getLogger(__name__)


class XmlMode(Mode):
    """Pretty printing and XPath ``sel`` queries through xmllint."""

    name = "xml"
    tool = "xmllint"

    def activate(self, context: ModeContext) -> ModeBindings:
        context.options.set_header("Accept", "text/xml")
        context.options.set_header("Content-Type", "text/xml")

        if not context.tools.available(self.tool):
            context.warn(f"{self.tool} unavailable, no pretty printing or xpath support.")
            return ModeBindings()
        return ModeBindings(
            response_filter=lambda data: self._format(context, data),
            select=lambda query, output: self._xpath(context, query, output),
        )

    def _format(self, context: ModeContext, data: bytes) -> bytes:
        if not data:
            return data
        try:
            return context.tools.run(self.tool, ["--format"], data)
        except (ToolError, ToolUnavailable) as exc:
            logger.warning("%s filter failed, using plain output: %s", self.tool, exc)
            context.warn_once(f"{self.name}:{self.tool}", f"{self.tool} could not format the output.")
            return plain_filter(data)

    def _xpath(self, context: ModeContext, query: str, output: bytes) -> str:
        return context.tools.run(self.tool, ["--xpath", query], output).decode(errors="replace") + "\n"
