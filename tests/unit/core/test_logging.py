"""
Unit Tests for Centralized Logging.

Tests the logging configuration loading and handler setup.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from notekeeper.core import logging as logging_module

TEST_CONFIG = {
    "level": "INFO",
    "format": "json",
    "handlers": {
        "console": {"enabled": True},
        "file": {
            "enabled": False,
            "path": "logs/system.jsonl",
            "max_bytes": 1024,
            "backup_count": 1,
        },
    },
}


@pytest.fixture(autouse=True)
def _reset_logging():
    """Restore the root logger after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestLoggingConfigLoading:
    """Tests for logging configuration loading from YAML."""

    def test_loads_and_caches_yaml(self):
        with patch(
            "notekeeper.core.logging.load_yaml_config", return_value=TEST_CONFIG
        ) as mock_load:
            first = logging_module._load_logging_config()
            second = logging_module._load_logging_config()

        assert first is second
        mock_load.assert_called_once_with("logging.yaml")

    def test_raises_if_file_missing(self):
        with patch(
            "notekeeper.core.logging.load_yaml_config",
            side_effect=FileNotFoundError("Configuration file not found: logging.yaml"),
        ):
            with pytest.raises(FileNotFoundError, match="logging.yaml"):
                logging_module._load_logging_config()


class TestSetupLogging:
    """Tests for setup_logging handler and level configuration."""

    @pytest.fixture(autouse=True)
    def _config(self):
        with patch("notekeeper.core.logging.load_yaml_config", return_value=TEST_CONFIG):
            yield

    def test_uses_config_level(self):
        logging_module.setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_override(self):
        logging_module.setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler_enabled(self):
        logging_module.setup_logging()
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_console_can_be_disabled(self):
        logging_module.setup_logging(enable_console=False)
        assert logging.getLogger().handlers == []

    def test_file_handler_writes_under_project_root(self, tmp_path):
        with patch("notekeeper.core.logging.find_project_root", return_value=tmp_path):
            logging_module.setup_logging(enable_console=False, enable_file_logging=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert (tmp_path / "logs").is_dir()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        logging_module.setup_logging()
        logging_module.setup_logging()
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_returns_logger_with_standard_methods(self):
        logger = logging_module.get_logger("notekeeper.test")
        for method in ("debug", "info", "warning", "error", "exception"):
            assert callable(getattr(logger, method))
