"""
Tests for logging utilities.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from stylecascade.utils.logger import configure_logging, get_logger, set_log_level
from stylecascade.utils.rich_logger import RichLogger, get_rich_logger


class TestLogger:
    """Test cases for logger configuration."""

    def test_get_logger(self):
        assert get_logger("stylecascade.test").name == "stylecascade.test"

    def test_get_logger_invalid_name(self):
        with pytest.raises(ValueError):
            get_logger("")

    def test_configure_rich(self):
        handler = configure_logging("DEBUG")

        assert isinstance(handler, RichHandler)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger().handlers == [handler]

    def test_configure_standard(self):
        handler = configure_logging("ERROR", use_rich=False)

        assert type(handler) is logging.StreamHandler
        assert handler.level == logging.ERROR

    def test_configure_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_set_log_level(self):
        handler = configure_logging("INFO", use_rich=False)
        set_log_level("debug")

        assert logging.getLogger().level == logging.DEBUG
        assert handler.level == logging.DEBUG


class TestRichLogger:
    """Test cases for rich console output."""

    @pytest.fixture
    def console(self):
        return Console(record=True, width=100)

    def test_get_rich_logger(self, console):
        rich_logger = get_rich_logger(console=console)

        assert isinstance(rich_logger, RichLogger)
        assert rich_logger.console is console

    def test_style_table(self, console):
        table = RichLogger(console=console).style_table("Button (default, active)", {"color": "red"})

        output = console.export_text()
        assert table.row_count == 1
        assert table.title == "Button (default, active)"
        assert table.min_width == len("Button (default, active)")
        assert "color" in output
        assert "red" in output

    def test_success_and_failure(self, console):
        rich_logger = RichLogger(console=console)
        rich_logger.success("compiled [default]")
        rich_logger.failure("missing")

        output = console.export_text()
        assert "✓ compiled [default]" in output
        assert "✗ missing" in output
