"""URL navigation commands for RestSession."""

from restshell.modules.urlstate import resolve

from .base import command


class NavigationMixin:
    """Provide cq, suffix and url."""

    @command
    def cq(self, target: str = "") -> bool:
        """Change the current URL the way ``cd`` changes directories."""
        self.url_state = resolve(self.url_state, target)
        return True

    @command
    def suffix(self, value: str = "") -> bool:
        """Set the string inserted after the path of every request URL."""
        self.url_state = self.url_state.with_suffix(value)
        return True

    def url(self) -> str:
        return self.url_state.render()
