"""
Taglog - tag-based line logging with solo/mute filtering and recent history.

Each line is written as ``<tag>: <message>``. Tags can be disabled, soloed or
muted at runtime, or configured in one go with a reusable LogScheme. The
GGLog variant also keeps the most recent lines for an on-screen overlay and
for sending by email.
"""

from taglog.core.config import LoggerConfig
from taglog.core.scheme import LogScheme
from taglog.logger import TagLogger, get_logger

__version__ = "0.1.0"
__all__ = ["LogScheme", "LoggerConfig", "TagLogger", "get_logger"]
