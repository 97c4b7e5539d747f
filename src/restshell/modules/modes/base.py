"""Base contract for content modes."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from restshell.modules.options import OptionStore

from .tools import ToolRunner

# raw body -> surfaced output
ResponseFilter = Callable[[bytes], bytes]
# (new input, previous output) -> payload
RequestFilter = Callable[[bytes, bytes], bytes]
# (query, previous output) -> selection
Selector = Callable[[str, bytes], str]


def identity_filter(data: bytes) -> bytes:
    return data


@dataclass
class ModeBindings:
    """Filters and select capability installed by the active mode."""

    response_filter: ResponseFilter = identity_filter
    request_filter: RequestFilter | None = None
    select: Selector | None = None


@dataclass
class ModeContext:
    """Shared state a mode may reconfigure while active."""

    options: OptionStore
    tools: ToolRunner
    warn: Callable[[str], None] = print
    _warned: set[str] = field(default_factory=set)

    def warn_once(self, key: str, message: str) -> None:
        """Emit ``message`` the first time ``key`` is seen."""
        if key in self._warned:
            return
        self._warned.add(key)
        self.warn(message)


class Mode(ABC):
    """Named bundle of headers, filters and a select operation."""

    name: str

    @abstractmethod
    def activate(self, context: ModeContext) -> ModeBindings:
        """Configure headers and return the filters this mode installs."""

    def deactivate(self, context: ModeContext) -> None:
        """Undo side effects of :meth:`activate` beyond the shared reset."""
