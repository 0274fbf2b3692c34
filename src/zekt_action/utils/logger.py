"""
Module: logger.py
Description: Structured logging configuration for the Zekt action.

Configures structlog for either JSON output or GitHub Actions workflow
commands, so warnings and errors surface as annotations in the run log.

Key Components:
- Timestamp and log level processors
- GitHub workflow-command renderer
- configure_logging() called once by the entry point
- get_logger() helper function

Dependencies: structlog, datetime, logging
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import structlog

# structlog method name -> GitHub workflow command
_WORKFLOW_COMMANDS = {
    "debug": "debug",
    "warning": "warning",
    "warn": "warning",
    "error": "error",
    "critical": "error",
    "exception": "error",
}


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def escape_command_data(value: str) -> str:
    """Escape a message for use inside a GitHub workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _render_workflow_command(logger, method_name: str, event_dict: Dict[str, Any]) -> str:
    """
    Render an event as a GitHub Actions log line.

    Debug, warning and error events become workflow commands; info
    events are printed as plain text. Extra keys are appended as
    key=value pairs.
    """
    event_dict.pop("timestamp", None)
    event_dict.pop("level", None)
    message = str(event_dict.pop("event", ""))

    exc_text = event_dict.pop("exception", None)
    if event_dict:
        context = " ".join(f"{key}={value}" for key, value in event_dict.items())
        message = f"{message} ({context})"
    if exc_text:
        message = f"{message}\n{exc_text}"

    command = _WORKFLOW_COMMANDS.get(method_name)
    if command is None:
        return message
    return f"::{command}::{escape_command_data(message)}"


def configure_logging(log_level: str = "INFO", log_format: str = "github") -> None:
    """
    Configure structlog for the current process.

    Args:
        log_level: Minimum level to emit (DEBUG, INFO, ...)
        log_format: "github" for workflow commands, "json" for JSON lines
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else _render_workflow_command
    )

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Retrying request", status_code=503, next_attempt=2)
        ::warning::Retrying request (status_code=503 next_attempt=2)
    """
    return structlog.get_logger(name)
