"""Shared pytest configuration and fixtures for all tests."""

import logging
import sys

import pytest

from linkheader.api.types.ResolvedUrl import ResolvedUrl


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "config: configuration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def example_base() -> ResolvedUrl:
    """Base URL used by the RFC 8288 examples."""
    return ResolvedUrl("https://www.example.org/")


@pytest.fixture
def fresh_logging(monkeypatch):
    """Reset the one-shot logging configuration around a test."""
    state = sys.modules["linkheader.utils.configure_logging"]
    root_logger = logging.getLogger("linkheader")
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    monkeypatch.setattr(state, "_CONFIGURED", False)
    monkeypatch.setattr(state, "_APPLIED", None)
    monkeypatch.delenv("LINKHEADER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LINKHEADER_LOG_FILE", raising=False)
    root_logger.handlers = []

    yield root_logger

    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)
