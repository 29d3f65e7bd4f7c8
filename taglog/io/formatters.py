"""Logging formatters for tagged output lines."""

import logging


class LineFormatter(logging.Formatter):
    """Formats a record as ``"<tag>: <message>\\n"``."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{record.tag}: {record.getMessage()}\n"
