"""Core state: tag filtering, history buffer, schemes and configuration."""

from taglog.core.config import LoggerConfig
from taglog.core.history import DEFAULT_HISTORY_LENGTH, RecentLogBuffer
from taglog.core.scheme import LogScheme
from taglog.core.state import FilterState, Solo, TagFilter, Unrestricted

__all__ = [
    "DEFAULT_HISTORY_LENGTH",
    "FilterState",
    "LogScheme",
    "LoggerConfig",
    "RecentLogBuffer",
    "Solo",
    "TagFilter",
    "Unrestricted",
]
