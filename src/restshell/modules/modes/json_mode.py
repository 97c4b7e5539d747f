"""JSON mode backed by jq, with json.tool and plain-text fallbacks."""

import logging

from restshell.errors import ToolError, ToolUnavailable

from .base import Mode, ModeBindings, ModeContext
from .plain import plain_filter, plain_select
from .tools import JSON_TOOL

logger = logging.getLogger(__name__)

JSON_ACCEPT = "application/json,*/*;q=0.9"
JSON_CONTENT_TYPE = "application/json"


class JsonMode(Mode):
    """Pretty printing, input shaping and ``sel`` queries through jq."""

    name = "json"
    query_tool = "jq"

    def activate(self, context: ModeContext) -> ModeBindings:
        context.options.set_header("Accept", JSON_ACCEPT)
        context.options.set_header("Content-Type", JSON_CONTENT_TYPE)

        if context.tools.available(self.query_tool):
            return ModeBindings(
                response_filter=lambda data: self._jq_filter(context, data),
                request_filter=lambda source, previous: self._jq_input(context, source, previous),
                select=lambda query, output: self._jq_select(context, query, output),
            )

        context.warn(f"{self.query_tool} unavailable.")
        if context.tools.accepts(JSON_TOOL, b"{}"):
            response_filter = lambda data: self._pretty_filter(context, data)  # noqa: E731
        else:
            context.warn("python json.tool unavailable, pretty printing disabled.")
            response_filter = plain_filter
        return ModeBindings(response_filter=response_filter, select=plain_select)

    def _fallback(self, context: ModeContext, tool: str, exc: Exception, data: bytes) -> bytes:
        logger.warning("%s filter failed, using plain output: %s", tool, exc)
        context.warn_once(f"{self.name}:{tool}", f"{tool} could not format the output.")
        return plain_filter(data)

    def _jq_filter(self, context: ModeContext, data: bytes) -> bytes:
        if not data:
            return data
        try:
            return context.tools.run(self.query_tool, ["."], data)
        except (ToolError, ToolUnavailable) as exc:
            return self._fallback(context, self.query_tool, exc, data)

    def _pretty_filter(self, context: ModeContext, data: bytes) -> bytes:
        if not data:
            return data
        try:
            return context.tools.run(JSON_TOOL, [], data)
        except (ToolError, ToolUnavailable) as exc:
            return self._fallback(context, JSON_TOOL, exc, data)

    def _jq_input(self, context: ModeContext, source: bytes, previous: bytes) -> bytes:
        """Normalize the payload, or apply it as a jq program to the previous output."""
        if previous:
            try:
                return context.tools.run(self.query_tool, ["-f"], source, previous)
            except ToolError:
                logger.debug("payload is not a jq program, sending it as JSON")
        return context.tools.run(self.query_tool, ["."], source)

    def _jq_select(self, context: ModeContext, query: str, output: bytes) -> str:
        return context.tools.run(self.query_tool, [query], output).decode(errors="replace")
