"""Shared pytest fixtures and configuration."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from flatgeom.config import Settings
from flatgeom.utils.logging import configure_logging


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        SRID_MISMATCH_POLICY="warn",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def unconfigured_logging() -> Iterator[None]:
    """Put structlog and the root logger back in their import-time state."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    saved_config = structlog.get_config()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    yield
    structlog.configure(**saved_config)
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
