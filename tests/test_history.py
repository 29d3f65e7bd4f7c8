"""Tests for the recent log buffer."""

import pytest

from taglog.core.history import DEFAULT_HISTORY_LENGTH, RecentLogBuffer


def test_default_length():
    assert RecentLogBuffer().history_length == DEFAULT_HISTORY_LENGTH == 300


def test_starts_empty():
    buffer = RecentLogBuffer()
    assert len(buffer) == 0
    assert buffer.render() == ""


def test_keeps_last_n_lines_in_order():
    buffer = RecentLogBuffer(history_length=10)
    lines = [f"T: line {i}\n" for i in range(15)]
    for line in lines:
        buffer.append(line)

    assert len(buffer) == 10
    assert buffer.lines == tuple(lines[5:])


def test_render_concatenates_lines():
    buffer = RecentLogBuffer(history_length=5)
    lines = ["A: one\n", "B: two\n", "A: three\n"]
    for line in lines:
        buffer.append(line)

    rendered = buffer.render()
    assert rendered == "A: one\nB: two\nA: three\n"
    parts = rendered.split("\n")
    assert parts[-1] == ""
    assert [p + "\n" for p in parts[:-1]] == lines


def test_zero_length_keeps_nothing():
    buffer = RecentLogBuffer(history_length=0)
    buffer.append("A: one\n")
    assert len(buffer) == 0


def test_shrinking_drops_oldest_lines():
    buffer = RecentLogBuffer(history_length=5)
    for i in range(5):
        buffer.append(f"{i}\n")

    buffer.history_length = 2
    assert buffer.lines == ("3\n", "4\n")

    buffer.append("5\n")
    assert buffer.lines == ("4\n", "5\n")


def test_growing_keeps_lines():
    buffer = RecentLogBuffer(history_length=2)
    buffer.append("a\n")
    buffer.append("b\n")
    buffer.history_length = 4
    buffer.append("c\n")
    assert buffer.lines == ("a\n", "b\n", "c\n")


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        RecentLogBuffer(history_length=-1)
    buffer = RecentLogBuffer()
    with pytest.raises(ValueError):
        buffer.history_length = -5


def test_iteration_is_a_snapshot():
    buffer = RecentLogBuffer(history_length=3)
    buffer.append("a\n")
    seen = []
    for line in buffer:
        seen.append(line)
        buffer.append("b\n")
    assert seen == ["a\n"]
