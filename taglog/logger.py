"""TagLogger: tagged line logging with filtering, history and export."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterable
from uuid import uuid4

from taglog.core.config import LoggerConfig
from taglog.core.history import RecentLogBuffer
from taglog.core.scheme import LogScheme
from taglog.core.state import FilterState, TagFilter
from taglog.io.handlers import Sink
from taglog.io.setup import setup_logging
from taglog.ui.mail import ConsoleMailComposer, MailComposer, MailDraft
from taglog.ui.overlay import LogOverlayPanel, OverlayPresenter


def _stdout_sink() -> Sink:
    return getattr(sys.stdout, "buffer", sys.stdout)


def _stderr_sink() -> Sink:
    return getattr(sys.stderr, "buffer", sys.stderr)


class TagLogger:
    """Writes ``"<tag>: <message>"`` lines, filtered by tag.

    Tags can be disabled one by one, or a set of tags can be soloed so that
    nothing else gets through. The two modes exclude each other: soloing drops
    the disabled tags, and enabling or disabling any tag drops the solo set.

    Logging never raises. A line that cannot be encoded is replaced by a fixed
    notice on the error sink.
    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        overlay: OverlayPresenter | None = None,
        mail_composer: MailComposer | None = None,
    ):
        config = config or LoggerConfig.gglog()
        self.id = uuid4().hex[:8]
        self.name = config.name

        self.default_log_tag = config.default_log_tag
        self.default_err_log_tag = config.default_err_log_tag
        self.email_address = config.email_address
        self.email_subject = config.email_subject
        self.email_message_prefix = config.email_message_prefix

        # None means the process's stdout/stderr, looked up on every write
        self.log_sink: Sink | None = None
        self.error_sink: Sink | None = None

        self.overlay = overlay
        self.mail_composer = mail_composer
        self.visual_logs_enabled = False
        self._showing_overlay = False

        self._lock = threading.RLock()
        self._history_length = config.history_length
        self.tag_filter = TagFilter()
        self.history = RecentLogBuffer(config.history_length) if config.keep_history else None

        self._log, history_handler = setup_logging(
            f"taglog.{self.name}.{self.id}",
            self.tag_filter,
            self._error_sink,
            self.history,
        )
        if history_handler is not None:
            history_handler.listeners.append(self._on_history_change)

    # Sinks

    def _log_sink(self) -> Sink:
        return self.log_sink if self.log_sink is not None else _stdout_sink()

    def _error_sink(self) -> Sink:
        return self.error_sink if self.error_sink is not None else _stderr_sink()

    # Logging

    def log(self, message: object, tag: str | None = None, sink: Sink | None = None) -> None:
        """Log ``message`` under ``tag`` to ``sink``.

        Args:
            message: Anything; rendered with ``str()``.
            tag: Defaults to ``default_log_tag``.
            sink: Writable byte stream. Defaults to the log sink (stdout).
        """
        tag = self.default_log_tag if tag is None else tag
        with self._lock:
            target = sink if sink is not None else self._log_sink()
            self._emit(message, tag, target)

    def log_err(self, message: object, tag: str | None = None) -> None:
        """Log to the error sink (stderr), under ``default_err_log_tag`` by default."""
        tag = self.default_err_log_tag if tag is None else tag
        with self._lock:
            self._emit(message, tag, self._error_sink())

    def _emit(self, message: object, tag: str, sink: Sink) -> None:
        # handle() skips level checks, so logging.disable() elsewhere has no effect
        record = self._log.makeRecord(
            self._log.name, logging.INFO, "", 0, message, (), None, extra={"tag": tag, "sink": sink}
        )
        self._log.handle(record)

    # Tag status

    def is_enabled(self, tag: str) -> bool:
        with self._lock:
            return self.tag_filter.is_enabled(tag)

    def set_tag(self, tag: str, enabled: bool) -> None:
        """Enable or disable one tag.

        Note: this also discards any previous ``solo_tags`` or ``mute`` call.
        """
        with self._lock:
            self.tag_filter.set_tag(tag, enabled)

    def solo_tags(self, tags: Iterable[str]) -> None:
        """Let only ``tags`` through. Overrides any enabled/disabled tags."""
        with self._lock:
            self.tag_filter.solo_tags(tags)

    def mute(self) -> None:
        with self._lock:
            self.tag_filter.mute()

    @property
    def filter_state(self) -> FilterState:
        return self.tag_filter.state

    def load_scheme(self, scheme: LogScheme) -> None:
        """Take on the configuration held by ``scheme``.

        The filter state is replaced outright. Sinks, history length and
        email settings are only replaced where the scheme sets them.
        """
        with self._lock:
            self.tag_filter.load_state(scheme.state)
            if scheme.log_sink is not None:
                self.log_sink = scheme.log_sink
            if scheme.error_sink is not None:
                self.error_sink = scheme.error_sink
            if scheme.visual_logging_enabled:
                self.enable_visual_logs()
            else:
                self.disable_visual_logs()
            if scheme.history_length is not None:
                self.history_length = scheme.history_length
            if scheme.email_address is not None:
                self.email_address = scheme.email_address
            if scheme.email_subject is not None:
                self.email_subject = scheme.email_subject
            if scheme.email_message_prefix is not None:
                self.email_message_prefix = scheme.email_message_prefix

    # History

    @property
    def history_length(self) -> int:
        return self._history_length

    @history_length.setter
    def history_length(self, value: int) -> None:
        with self._lock:
            if self.history is not None:
                self.history.history_length = value
            elif value < 0:
                raise ValueError(f"history_length must be >= 0, got {value}")
            self._history_length = value

    @property
    def recent_logs(self) -> tuple[str, ...]:
        with self._lock:
            return self.history.lines if self.history is not None else ()

    def exportable_text(self) -> str:
        """All retained lines as one string, oldest first."""
        with self._lock:
            return self.history.render() if self.history is not None else ""

    # Visual overlay

    @property
    def showing_overlay(self) -> bool:
        return self._showing_overlay

    def enable_visual_logs(self) -> None:
        """Let ``toggle_overlay`` open the overlay."""
        with self._lock:
            self.visual_logs_enabled = True

    def disable_visual_logs(self) -> None:
        with self._lock:
            if not self.visual_logs_enabled:
                return
            self.visual_logs_enabled = False
            self.hide_overlay()

    def toggle_overlay(self) -> None:
        """Show or hide the overlay. Does nothing unless visual logs are enabled."""
        with self._lock:
            if not self.visual_logs_enabled:
                return
            if self._showing_overlay:
                self.hide_overlay()
            else:
                self.show_overlay()

    def show_overlay(self) -> None:
        with self._lock:
            if self.overlay is None or self._showing_overlay:
                return
            self.overlay.show(self.exportable_text())
            self._showing_overlay = True

    def hide_overlay(self) -> None:
        with self._lock:
            if self.overlay is None or not self._showing_overlay:
                return
            self.overlay.hide()
            self._showing_overlay = False

    def _on_history_change(self, history: RecentLogBuffer) -> None:
        if self._showing_overlay and self.overlay is not None:
            self.overlay.set_display_text(history.render())

    # Export

    def compose_mail(self) -> MailDraft:
        """Build a mail draft with the recent logs and the email settings."""
        with self._lock:
            return MailDraft.build(
                self.exportable_text(),
                sender_name=self.name,
                recipient=self.email_address,
                subject=self.email_subject,
                prefix=self.email_message_prefix,
            )

    def send_logs(self, composer: MailComposer | None = None) -> bool:
        """Hand a mail draft to ``composer`` (or ``mail_composer``).

        Returns False without doing anything when there is no composer.
        The overlay is hidden once the draft has been presented.
        """
        composer = composer or self.mail_composer
        if composer is None:
            return False
        draft = self.compose_mail()
        composer.present(draft)
        self.hide_overlay()
        return True


_default_logger: TagLogger | None = None
_default_lock = threading.Lock()


def get_logger() -> TagLogger:
    """Get the process-wide default logger, creating it on first use."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = TagLogger(
                LoggerConfig.gglog(),
                overlay=LogOverlayPanel(),
                mail_composer=ConsoleMailComposer(),
            )
        return _default_logger
