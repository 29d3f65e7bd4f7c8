"""Routing of tagged lines through stdlib logging."""

from taglog.io.filters import TagStateFilter
from taglog.io.formatters import LineFormatter
from taglog.io.handlers import FALLBACK_MESSAGE, HistoryHandler, Sink, SinkHandler
from taglog.io.setup import setup_logging

__all__ = [
    "FALLBACK_MESSAGE",
    "TagStateFilter",
    "LineFormatter",
    "Sink",
    "SinkHandler",
    "HistoryHandler",
    "setup_logging",
]
