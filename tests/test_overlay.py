"""Tests for the visual overlay."""

from io import StringIO
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from taglog.logger import TagLogger
from taglog.ui.overlay import LogOverlayPanel


@pytest.fixture
def presenter() -> MagicMock:
    return MagicMock(spec=LogOverlayPanel)


@pytest.fixture
def visual_logger(logger: TagLogger, presenter: MagicMock) -> TagLogger:
    logger.overlay = presenter
    logger.enable_visual_logs()
    return logger


def test_show_overlay_pushes_current_text(visual_logger, presenter):
    visual_logger.log("hello", tag="X")
    visual_logger.show_overlay()
    presenter.show.assert_called_once_with("X: hello\n")
    assert visual_logger.showing_overlay is True


def test_overlay_refreshes_while_visible(visual_logger, presenter):
    visual_logger.show_overlay()
    visual_logger.log("hello", tag="X")
    presenter.set_display_text.assert_called_once_with("X: hello\n")


def test_overlay_not_refreshed_when_hidden(visual_logger, presenter):
    visual_logger.log("hello", tag="X")
    presenter.set_display_text.assert_not_called()


def test_overlay_not_refreshed_for_filtered_tag(visual_logger, presenter):
    visual_logger.show_overlay()
    visual_logger.set_tag("X", False)
    visual_logger.log("hello", tag="X")
    presenter.set_display_text.assert_not_called()


def test_toggle_overlay(visual_logger, presenter):
    visual_logger.toggle_overlay()
    assert visual_logger.showing_overlay is True
    visual_logger.toggle_overlay()
    assert visual_logger.showing_overlay is False
    presenter.hide.assert_called_once()


def test_toggle_ignored_when_visual_logs_disabled(logger, presenter):
    logger.overlay = presenter
    logger.toggle_overlay()
    assert logger.showing_overlay is False
    presenter.show.assert_not_called()


def test_disable_visual_logs_hides_overlay(visual_logger, presenter):
    visual_logger.show_overlay()
    visual_logger.disable_visual_logs()
    assert visual_logger.visual_logs_enabled is False
    assert visual_logger.showing_overlay is False
    presenter.hide.assert_called_once()


def test_show_overlay_without_presenter_is_skipped(logger):
    logger.enable_visual_logs()
    logger.show_overlay()
    logger.toggle_overlay()
    assert logger.showing_overlay is False


def test_log_overlay_panel_lifecycle():
    output = StringIO()
    console = Console(file=output, force_terminal=True, width=60)
    panel = LogOverlayPanel(console=console)

    panel.show("X: first\n")
    assert panel.is_active
    panel.set_display_text("X: first\nX: second\n")
    assert panel.text == "X: first\nX: second\n"
    panel.hide()

    assert not panel.is_active
    assert "second" in output.getvalue()


def test_log_overlay_panel_does_not_parse_markup():
    output = StringIO()
    console = Console(file=output, width=60)
    panel = LogOverlayPanel(console=console)

    panel.show("X: [bold]not markup[/bold]\n")
    panel.hide()

    assert "[bold]not markup[/bold]" in output.getvalue()


def test_set_display_text_before_show_only_stores():
    panel = LogOverlayPanel(console=Console(file=StringIO()))
    panel.set_display_text("X: hi\n")
    assert panel.text == "X: hi\n"
    assert not panel.is_active
