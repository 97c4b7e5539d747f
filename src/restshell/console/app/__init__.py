"""Interactive console application package."""

from .manager import ConsoleApp

__all__ = ["ConsoleApp"]
