"""Bounded in-memory history of recent log lines."""

from collections import deque
from collections.abc import Iterator

DEFAULT_HISTORY_LENGTH = 300


class RecentLogBuffer:
    """Keeps the last ``history_length`` formatted lines, oldest first.

    Lines are stored exactly as rendered, trailing newline included. The
    buffer lives in memory only and has no clear operation.
    """

    def __init__(self, history_length: int = DEFAULT_HISTORY_LENGTH) -> None:
        if history_length < 0:
            raise ValueError(f"history_length must be >= 0, got {history_length}")
        self._lines: deque[str] = deque(maxlen=history_length)

    @property
    def history_length(self) -> int:
        return self._lines.maxlen

    @history_length.setter
    def history_length(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"history_length must be >= 0, got {value}")
        # deque keeps the newest items when rebuilt with a smaller maxlen
        self._lines = deque(self._lines, maxlen=value)

    def append(self, line: str) -> None:
        """Add a line, evicting the oldest one if the bound is exceeded."""
        self._lines.append(line)

    def render(self) -> str:
        """Get all retained lines as one string, in insertion order."""
        return "".join(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))
