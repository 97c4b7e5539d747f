"""Helpers shared by the session mixins."""

import functools
import getpass
from collections.abc import Callable
from typing import Any

from restshell.errors import RestShellError


def default_prompter(label: str, secret: bool = False) -> str:
    if secret:
        return getpass.getpass(f"{label}: ")
    return input(f"{label}: ")


def command(func: Callable[..., bool]) -> Callable[..., bool]:
    """Report restshell errors to the operator and turn them into ``False``."""

    @functools.wraps(func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> bool:
        try:
            return func(self, *args, **kwargs)
        except RestShellError as exc:
            self.error(str(exc))
            return False

    return wrapper
