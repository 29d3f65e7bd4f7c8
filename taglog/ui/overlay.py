"""Overlay presenters showing recent log lines."""

from typing import Protocol

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from taglog.ui.console import console as default_console


class OverlayPresenter(Protocol):
    """Protocol for surfaces that display the recent log text."""

    def show(self, _text: str) -> None: ...

    def set_display_text(self, _text: str) -> None: ...

    def hide(self) -> None: ...


class LogOverlayPanel:
    """Live-updating terminal panel with the recent log lines."""

    def __init__(self, console: Console | None = None, title: str = "Recent logs"):
        self.console = console or default_console
        self.title = title
        self._live: Live | None = None
        self._text = ""

    def _make_panel(self) -> Panel:
        # Text() keeps log content from being read as rich markup
        content = Text(self._text.rstrip("\n") or " ")
        return Panel(content, title=f"[bold]{self.title}[/]", border_style="dim")

    def show(self, text: str) -> None:
        """Start the live panel."""
        self._text = text
        if self._live is None:
            self._live = Live(
                self._make_panel(),
                console=self.console,
                refresh_per_second=4,
            )
            self._live.start()
        else:
            self._live.update(self._make_panel())

    def set_display_text(self, text: str) -> None:
        """Replace the displayed text."""
        self._text = text
        if self._live:
            self._live.update(self._make_panel())

    def hide(self) -> None:
        """Stop the live panel if it is open."""
        if self._live:
            self._live.stop()
            self._live = None

    @property
    def is_active(self) -> bool:
        return self._live is not None

    @property
    def text(self) -> str:
        return self._text
