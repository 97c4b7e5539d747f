"""Session management for restshell."""

from .base import command, default_prompter
from .manager import RestSession

__all__ = ["RestSession", "command", "default_prompter"]
