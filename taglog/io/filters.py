"""Logging filters for tag-based routing."""

import logging

from taglog.core.state import TagFilter


class TagStateFilter(logging.Filter):
    """Filter log records by tag attribute against a live TagFilter."""

    def __init__(self, tag_filter: TagFilter) -> None:
        super().__init__()
        self.tag_filter = tag_filter

    def filter(self, record: logging.LogRecord) -> bool:
        return self.tag_filter.is_enabled(record.tag)
