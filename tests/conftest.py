"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from io import BytesIO

import pytest

from taglog.logger import TagLogger


@pytest.fixture
def out() -> BytesIO:
    """Sink standing in for stdout."""
    return BytesIO()


@pytest.fixture
def err() -> BytesIO:
    """Sink standing in for stderr."""
    return BytesIO()


@pytest.fixture
def logger(out: BytesIO, err: BytesIO) -> TagLogger:
    """Create a fresh GGLog-style logger writing to in-memory sinks."""
    logger = TagLogger()
    logger.log_sink = out
    logger.error_sink = err
    return logger
