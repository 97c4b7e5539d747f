"""History navigation commands for RestSession."""

from .base import command


class HistoryMixin:
    """Provide back, forward, first and last over the response history."""

    @command
    def back(self, count: int = 1) -> bool:
        self._surface_output(self.history.back(count))
        return True

    @command
    def forward(self, count: int = 1) -> bool:
        self._surface_output(self.history.forward(count))
        return True

    @command
    def first(self, adjust: int = 0) -> bool:
        self._surface_output(self.history.first(adjust))
        return True

    @command
    def last(self, adjust: int = 0) -> bool:
        self._surface_output(self.history.last(adjust))
        return True

    def history_label(self) -> str:
        return self.history.position_label()
