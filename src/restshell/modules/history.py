"""Response history kept as one compressed, offset-indexed byte log."""

import gzip
import threading

from restshell.errors import HistoryBoundsError


class HistoryStore:
    """Append-only arena of gzip members with marks and a cursor.

    ``marks[0]`` is the empty baseline, ``marks[i]`` the end offset of entry
    ``i``. The cursor is 1-based: ``cursor == len(marks)`` means "at the
    latest output". Entry ``i`` occupies ``log[marks[i-1]:marks[i]]`` and is
    an independently decodable gzip member.
    """

    def __init__(self) -> None:
        self._log = bytearray()
        self._marks: list[int] = [0]
        self._cursor = 1
        self._lock = threading.RLock()

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def marks(self) -> list[int]:
        return list(self._marks)

    @property
    def size(self) -> int:
        """Compressed size of the log in bytes."""
        return len(self._log)

    def __len__(self) -> int:
        """Number of recorded entries."""
        return len(self._marks) - 1

    def append(self, data: bytes) -> int:
        """Record ``data`` at the cursor, discarding any redo tail.

        Returns the new entry's 1-based index.
        """
        member = gzip.compress(data, mtime=0)
        with self._lock:
            if self._cursor < len(self._marks):
                del self._marks[self._cursor :]
                del self._log[self._marks[-1] :]
            self._log += member
            self._marks.append(len(self._log))
            self._cursor = len(self._marks)
            return len(self._marks) - 1

    def fetch(self, index: int | None = None) -> bytes:
        """Decompress entry ``index`` (default: the latest entry)."""
        with self._lock:
            if index is None:
                index = len(self._marks) - 1
            if index < 1 or index >= len(self._marks):
                raise HistoryBoundsError(f"No history entry {index}")
            start, end = self._marks[index - 1], self._marks[index]
            member = bytes(self._log[start:end])
        return gzip.decompress(member)

    def pop_last(self, count: int = 1) -> None:
        """Drop the last ``count`` entries and truncate the log."""
        with self._lock:
            count = min(max(count, 0), len(self._marks) - 1)
            if count:
                del self._marks[-count:]
                del self._log[self._marks[-1] :]
            if self._cursor > len(self._marks):
                self._cursor = len(self._marks)

    def goto_mark(self, index: int) -> bytes:
        """Move the cursor to mark ``index`` and return that output."""
        with self._lock:
            if index > len(self._marks):
                raise HistoryBoundsError("No later output")
            if index < 2:
                raise HistoryBoundsError("No previous output")
            data = self.fetch(index - 1)
            self._cursor = index
            return data

    def back(self, count: int = 1) -> bytes:
        with self._lock:
            return self.goto_mark(self._cursor - count)

    def forward(self, count: int = 1) -> bytes:
        with self._lock:
            return self.goto_mark(self._cursor + count)

    def first(self, adjust: int = 0) -> bytes:
        return self.goto_mark(2 + adjust)

    def last(self, adjust: int = 0) -> bytes:
        with self._lock:
            return self.goto_mark(len(self._marks) - adjust)

    def position_label(self) -> str:
        """``"pos/total"`` while browsing back, empty at the latest output."""
        total = len(self._marks)
        if self._cursor == total:
            return ""
        return f"{self._cursor - 1}/{total - 1}"
