"""Logger setup and wiring."""

from __future__ import annotations

import logging
from collections.abc import Callable

from taglog.core.history import RecentLogBuffer
from taglog.core.state import TagFilter
from taglog.io.filters import TagStateFilter
from taglog.io.handlers import HistoryHandler, Sink, SinkHandler


def setup_logging(
    name: str,
    tag_filter: TagFilter,
    error_sink: Callable[[], Sink],
    history: RecentLogBuffer | None = None,
) -> tuple[logging.Logger, HistoryHandler | None]:
    """Configure a dedicated logger that writes tagged lines.

    Args:
        name: Logger name, shown on records.
        tag_filter: Decides which tags get through. Checked on the logger
            itself, so a rejected record reaches no handler at all.
        error_sink: Returns the sink used for the encoding fallback.
        history: Buffer for recent lines. No history handler when None.

    Returns:
        The logger and its history handler, if any.
    """
    # Not registered with the logging manager, so it goes away with its owner
    log = logging.Logger(name, logging.INFO)
    log.propagate = False

    log.addFilter(TagStateFilter(tag_filter))

    # Sink handler: every accepted line
    log.addHandler(SinkHandler(error_sink))

    # History handler: every accepted line, after the sink write
    history_handler = None
    if history is not None:
        history_handler = HistoryHandler(history)
        log.addHandler(history_handler)

    return log, history_handler
