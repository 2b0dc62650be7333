"""Pytest configuration and fixtures for caldate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add the parent directory to sys.path so caldate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def log_messages():
    """Collect caldate's loguru records for the duration of a test."""
    messages: list[str] = []
    logger.enable("caldate")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable("caldate")
