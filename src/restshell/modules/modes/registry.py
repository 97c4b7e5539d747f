"""Mode registry and the mode switching lifecycle."""

import logging

from restshell.errors import UsageError

from .base import Mode, ModeBindings, ModeContext
from .json_mode import JsonMode
from .plain import PlainMode
from .xml_mode import XmlMode

logger = logging.getLogger(__name__)

NONE_MODE = "none"


class NoneMode(Mode):
    """No headers beyond the reset defaults and no filtering."""

    name = NONE_MODE

    def activate(self, context: ModeContext) -> ModeBindings:
        return ModeBindings()


def create_default_modes() -> list[Mode]:
    """Return the built-in modes."""
    return [NoneMode(), PlainMode(), JsonMode(), XmlMode()]


class ModeRegistry:
    """Table of named modes with exactly one active at a time."""

    def __init__(self, context: ModeContext, modes: list[Mode] | None = None) -> None:
        self.context = context
        self._modes: dict[str, Mode] = {}
        for mode in create_default_modes() if modes is None else modes:
            self.register(mode)
        if NONE_MODE not in self._modes:
            self.register(NoneMode())
        self._active = NONE_MODE
        self.bindings = ModeBindings()

    @property
    def active(self) -> str:
        return self._active

    @property
    def active_mode(self) -> Mode:
        return self._modes[self._active]

    def names(self) -> list[str]:
        return sorted(self._modes)

    def register(self, mode: Mode) -> None:
        """Add or replace a mode; replacing the active one takes effect on next switch."""
        self._modes[mode.name] = mode

    def __contains__(self, name: str) -> bool:
        return name in self._modes

    def reset_overrides(self) -> None:
        """Return the shared overrides every mode may touch to neutral values."""
        self.context.options.set_header("Accept", "*/*")
        self.context.options.clear_header("Content-Type")
        self.bindings = ModeBindings()

    def switch_to(self, name: str) -> None:
        """Deactivate the current mode and activate ``name``.

        Raises:
            UsageError: ``name`` is not registered; nothing changes
        """
        incoming = self._modes.get(name)
        if incoming is None:
            raise UsageError(f"mode: '{name}' unknown")

        self.active_mode.deactivate(self.context)
        self.reset_overrides()
        # a failing activate leaves the registry in none
        self._active = NONE_MODE
        self.bindings = incoming.activate(self.context)
        self._active = name
        logger.debug("mode switched to %s", name)

    def shutdown(self) -> None:
        """Leave the active mode, running its deactivate hook."""
        self.switch_to(NONE_MODE)
