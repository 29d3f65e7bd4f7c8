"""Tests for logging formatters."""

import logging

from taglog.io.formatters import LineFormatter


def test_line_formatter_prefixes_tag():
    f = LineFormatter()
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0, msg="hello", args=(), exc_info=None
    )
    record.tag = "X"
    assert f.format(record) == "X: hello\n"


def test_line_formatter_uses_str_of_message():
    f = LineFormatter()
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0, msg=[1, 2], args=(), exc_info=None
    )
    record.tag = "List"
    assert f.format(record) == "List: [1, 2]\n"


def test_line_formatter_leaves_percent_signs_alone():
    f = LineFormatter()
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0, msg="100% done", args=(), exc_info=None
    )
    record.tag = "Progress"
    assert f.format(record) == "Progress: 100% done\n"
