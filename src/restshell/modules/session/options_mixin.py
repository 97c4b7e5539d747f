"""Header and request-option commands for RestSession."""

from pathlib import Path

from restshell.errors import UsageError
from restshell.modules.options import truth

from .base import command


class OptionsMixin:
    """Provide header, authentication, TLS, cookie-jar and user-agent commands."""

    @command
    def header(self, name: str | None = None, *values: str, delete: bool = False) -> bool:
        """Set, clear, show or list request headers.

        ``header`` lists all headers, ``header NAME`` shows one,
        ``header NAME VALUE...`` sets it (values joined by spaces) and
        ``header -d NAME`` removes it.
        """
        if name is None:
            for header_name, value in self.option_store.list_headers():
                self.info(f"{header_name}: {value}")
            return True
        if values:
            if delete:
                raise UsageError("Can't set and delete at the same time.")
            self.option_store.set_header(name, " ".join(values))
        elif delete:
            self.option_store.clear_header(name)
        else:
            self.info(f"{name}: {self.option_store.get_header(name) or ''}")
        return True

    def accept(self, *values: str, delete: bool = False) -> bool:
        return self.header("Accept", *values, delete=delete)

    def authorization(self, *values: str, delete: bool = False) -> bool:
        return self.header("Authorization", *values, delete=delete)

    def content_type(self, *values: str, delete: bool = False) -> bool:
        return self.header("Content-Type", *values, delete=delete)

    def cookie(self, *values: str, delete: bool = False) -> bool:
        return self.header("Cookie", *values, delete=delete)

    @command
    def basic_auth(self, user: str | None = None, password: str | None = None) -> bool:
        """Set Basic credentials, prompting for what is missing."""
        if not user:
            user = self.prompter("Username", False)
        if user and not password:
            password = self.prompter("Password", True)
        self.option_store.set_basic_auth(user, password or "")
        return True

    @command
    def ssl_insecure(self, setting: str | None = None) -> bool:
        if not setting:
            self.info(f"ssl-insecure: {'on' if self.option_store.ssl_insecure else 'off'}")
            return True
        enabled = truth(setting)
        if enabled is None:
            raise UsageError("Usage: ssl-insecure [on|off]")
        self.option_store.ssl_insecure = enabled
        return True

    @command
    def cookie_jar(self, setting: str | None = None) -> bool:
        """Show or set the cookie jar: ``on`` (session jar), ``off`` or a file."""
        if not setting:
            current = self.option_store.cookie_jar
            if current is None:
                label = "off"
            elif current == self.workspace.cookie_jar:
                label = "on"
            else:
                label = str(current)
            self.info(f"cookie-jar: {label}")
            return True

        enabled = truth(setting)
        if enabled is True:
            self.option_store.cookie_jar = self.workspace.cookie_jar
        elif enabled is False:
            self.option_store.cookie_jar = None
        else:
            self.option_store.cookie_jar = Path(setting).expanduser()
        return True

    @command
    def user_agent(self, value: str | None = None, delete: bool = False) -> bool:
        if delete:
            self.option_store.user_agent = None
        elif value:
            self.option_store.user_agent = value
        else:
            self.info(f"user-agent: {self.option_store.user_agent or 'default'}")
        return True
