"""Pytest fixtures for utilkit tests"""
import io
import logging
from datetime import datetime, timezone

import pytest
from rich.console import Console


@pytest.fixture
def sample_date():
    """A naive local datetime with every component distinct."""
    return datetime(2024, 3, 15, 14, 30, 45)


@pytest.fixture
def reference_now():
    """A fixed, timezone-aware reference instant for relative-time tests.

    Aware datetimes keep the arithmetic exact regardless of the host's DST rules.
    """
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_config():
    """Create a demo configuration dictionary."""
    return {
        'sections': ['dates', 'arrays'],
        'date_pattern': 'YYYY-MM-DD',
        'chunk_size': 2,
        'reference_time': '2024-03-15T14:30:45',
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)


@pytest.fixture
def console_output():
    """A rich Console writing to a buffer wide enough to avoid wrapping."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200), buffer
