"""Content modes -- header presets, response/request filters and selection."""

from .base import Mode, ModeBindings, ModeContext, identity_filter
from .json_mode import JsonMode
from .plain import PlainMode, plain_filter, plain_select
from .registry import NONE_MODE, ModeRegistry, NoneMode, create_default_modes
from .tools import EXTERNAL_TOOLS, JSON_TOOL, ToolRunner, check_tool_availability
from .xml_mode import XmlMode

__all__ = [
    "EXTERNAL_TOOLS",
    "JSON_TOOL",
    "JsonMode",
    "Mode",
    "ModeBindings",
    "ModeContext",
    "ModeRegistry",
    "NONE_MODE",
    "NoneMode",
    "PlainMode",
    "ToolRunner",
    "XmlMode",
    "check_tool_availability",
    "create_default_modes",
    "identity_filter",
    "plain_filter",
    "plain_select",
]
