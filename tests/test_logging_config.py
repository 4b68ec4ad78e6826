"""Tests for logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from go_dataclass.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging


class TestGetLogger:
    """Test logger naming."""

    def test_module_names_are_kept(self):
        assert get_logger("go_dataclass.utils").name == "go_dataclass.utils"

    def test_foreign_names_are_namespaced(self):
        assert get_logger("plugin").name == "go_dataclass.plugin"


class TestSetupLogging:
    """Test handler installation."""

    def test_levels(self):
        assert setup_logging(debug=True).level == logging.DEBUG
        assert setup_logging(debug=False).level == logging.WARNING

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        logger = setup_logging()

        assert logger.name == ROOT_LOGGER_NAME
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_records_reach_the_given_console(self):
        console = Console(record=True, width=120)
        setup_logging(debug=True, console=console)

        get_logger("go_dataclass.test").debug("hello %s", "there")

        assert "dataclass: hello there" in console.export_text()
