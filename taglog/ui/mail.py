"""Mail drafts for sending recent logs."""

from __future__ import annotations

from email.message import EmailMessage
from typing import Protocol

from pydantic import BaseModel, Field
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from taglog.ui.console import console as default_console


class MailDraft(BaseModel):
    """A pre-populated outgoing message."""

    recipients: list[str] = Field(default_factory=list)
    subject: str
    body: str

    @classmethod
    def build(
        cls,
        text: str,
        sender_name: str,
        recipient: str | None = None,
        subject: str | None = None,
        prefix: str | None = None,
    ) -> MailDraft:
        """Build a draft around exported log text.

        The prefix, when given, goes above the logs separated by a blank line.
        Useful for identifying who sent the logs.
        """
        body = f"{prefix}\n\n" if prefix is not None else ""
        body += text
        return cls(
            recipients=[recipient] if recipient else [],
            subject=subject or f"Some logs from {sender_name}",
            body=body,
        )

    def to_message(self) -> EmailMessage:
        """Convert to a stdlib message, ready for smtplib."""
        message = EmailMessage()
        if self.recipients:
            message["To"] = ", ".join(self.recipients)
        message["Subject"] = self.subject
        message.set_content(self.body)
        return message


class MailComposer(Protocol):
    """Protocol for whatever presents a draft to the user."""

    def present(self, _draft: MailDraft) -> None: ...


class ConsoleMailComposer:
    """Prints the draft in a panel so it can be copied out of a terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def present(self, draft: MailDraft) -> None:
        header = f"To: {', '.join(draft.recipients) or '-'}\nSubject: {draft.subject}\n\n"
        self.console.print(Panel(
            Text(header + draft.body.rstrip("\n")),
            title="[bold cyan]Send logs[/]",
            border_style="cyan",
        ))
