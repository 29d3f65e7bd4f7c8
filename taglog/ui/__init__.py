"""UI collaborators: terminal overlay and mail export."""

from taglog.ui.console import console, get_console
from taglog.ui.mail import ConsoleMailComposer, MailComposer, MailDraft
from taglog.ui.overlay import LogOverlayPanel, OverlayPresenter

__all__ = [
    "console",
    "get_console",
    "LogOverlayPanel",
    "OverlayPresenter",
    "MailDraft",
    "MailComposer",
    "ConsoleMailComposer",
]
