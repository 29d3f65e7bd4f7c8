"""Logging handlers for sink output and recent-line history."""

import logging
from collections.abc import Callable
from typing import Protocol

from taglog.core.history import RecentLogBuffer
from taglog.io.formatters import LineFormatter

FALLBACK_MESSAGE = b"Unable to convert string!"


class Sink(Protocol):
    """Protocol for writable byte streams."""

    def write(self, _data: bytes) -> object: ...


HistoryListener = Callable[[RecentLogBuffer], None]


def write_to(sink: Sink, data: bytes) -> None:
    """Write bytes to a sink, flushing it if it supports that."""
    sink.write(data)
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()


class SinkHandler(logging.Handler):
    """Writes UTF-8 encoded lines to the sink carried on each record."""

    def __init__(self, error_sink: Callable[[], Sink]) -> None:
        super().__init__()
        self.error_sink = error_sink
        self.setFormatter(LineFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            data = self.format(record).encode("utf-8")
            write_to(record.sink, data)
        except Exception:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        """Report the failure on the error sink, whatever sink was targeted."""
        try:
            write_to(self.error_sink(), FALLBACK_MESSAGE)
        except Exception:
            super().handleError(record)


class HistoryHandler(logging.Handler):
    """Appends formatted lines to a RecentLogBuffer and notifies listeners."""

    def __init__(self, history: RecentLogBuffer) -> None:
        super().__init__()
        self.history = history
        self.listeners: list[HistoryListener] = []
        self.setFormatter(LineFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except Exception:
            # SinkHandler already wrote the fallback notice for this record
            return
        try:
            self.history.append(line)
            for listener in self.listeners:
                listener(self.history)
        except Exception:
            self.handleError(record)
