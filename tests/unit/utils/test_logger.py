"""
Module: test_logger.py
Description: Unit tests for the structlog configuration.
"""

import json

import structlog

from zekt_action.utils.logger import (
    _render_workflow_command,
    configure_logging,
    escape_command_data,
)


class TestWorkflowCommandRenderer:
    """Test cases for the GitHub Actions renderer."""

    def test_warning_becomes_workflow_command(self):
        line = _render_workflow_command(None, "warning", {
            "event": "Retrying registration",
            "status_code": 503,
            "timestamp": "2024-01-15T10:30:00+00:00",
            "level": "WARNING",
        })

        assert line == "::warning::Retrying registration (status_code=503)"

    def test_info_is_plain_text(self):
        line = _render_workflow_command(None, "info", {"event": "Validating inputs..."})

        assert line == "Validating inputs..."

    def test_error_and_debug_commands(self):
        assert _render_workflow_command(None, "error", {"event": "boom"}) == "::error::boom"
        assert _render_workflow_command(None, "debug", {"event": "detail"}) == "::debug::detail"

    def test_multiline_messages_are_escaped(self):
        assert escape_command_data("a%b\r\nc") == "a%25b%0D%0Ac"


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_json_format(self, capsys):
        """Test JSON output carries level and timestamp."""
        try:
            configure_logging("INFO", "json")
            structlog.get_logger("test_json").info("Registered", run_id=1)

            entry = json.loads(capsys.readouterr().out.strip())
            assert entry["event"] == "Registered"
            assert entry["run_id"] == 1
            assert entry["level"] == "INFO"
            assert "timestamp" in entry
        finally:
            structlog.reset_defaults()

    def test_level_filtering(self, capsys):
        """Test events below the configured level are dropped."""
        try:
            configure_logging("WARNING", "github")
            logger = structlog.get_logger("test_filtering")
            logger.info("hidden")
            logger.warning("shown")

            assert capsys.readouterr().out == "::warning::shown\n"
        finally:
            structlog.reset_defaults()
