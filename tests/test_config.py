"""Tests for configuration and logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from localize_catalog.config import Config
from localize_catalog.logging_config import LOGGING_CONFIG, PACKAGE_LOGGER, setup_logging


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in ("LOCALIZE_SOURCE_LANGUAGE", "LOCALIZE_LOG_LEVEL", "LOCALIZE_JSON_NESTED"):
            monkeypatch.delenv(name, raising=False)

        config = Config()

        assert config.source_language == "en"
        assert config.log_level == "WARNING"
        assert config.json_nested is False
        assert config.validate() == []

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOCALIZE_SOURCE_LANGUAGE", "de")
        monkeypatch.setenv("LOCALIZE_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOCALIZE_JSON_NESTED", "yes")

        config = Config()

        assert config.source_language == "de"
        assert config.log_level == "DEBUG"
        assert config.json_nested is True

    def test_validate_reports_errors(self):
        config = Config(source_language=" ", log_level="LOUD")

        errors = config.validate()

        assert len(errors) == 2
        assert any("LOCALIZE_LOG_LEVEL" in e for e in errors)


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def reset(self):
        yield
        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        for name in LOGGING_CONFIG:
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_installs_rich_handler(self):
        setup_logging("INFO")

        logger = logging.getLogger(PACKAGE_LOGGER)
        assert logger.level == logging.INFO
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_component_floors(self):
        setup_logging("DEBUG")

        assert logging.getLogger("localize_catalog.extraction").level == logging.INFO
        assert logging.getLogger("localize_catalog.merge").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("chatty")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        setup_logging("INFO")

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
