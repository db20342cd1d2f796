"""
Unit Test Fixtures.

Fixtures for unit tests - external dependencies are mocked.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_logging_config() -> dict:
    """Logging configuration as loaded from logging.yaml."""
    return {
        "level": "INFO",
        "format": "json",
        "handlers": {
            "console": {"enabled": True},
            "file": {
                "enabled": True,
                "path": "logs/system.jsonl",
                "max_bytes": 10485760,
                "backup_count": 5,
            },
        },
    }


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            service._logger = mock_logger
            # Test code that logs
            mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
