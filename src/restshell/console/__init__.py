"""Interactive console for restshell."""

from .app import ConsoleApp

__all__ = ["ConsoleApp"]
