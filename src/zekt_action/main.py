"""
Module: main.py
Description: Entry point for the Zekt action.

Configures logging, runs the registration pipeline against the GitHub
Actions runner environment and returns the process exit code.
"""

import asyncio

from pydantic import ValidationError

from zekt_action.config.settings import LoggingSettings
from zekt_action.host.github import GitHubActionsHost
from zekt_action.runner import run
from zekt_action.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    """Run the action and return the exit code for the runner."""
    try:
        logging_settings = LoggingSettings()
        configure_logging(logging_settings.log_level, logging_settings.log_format)
    except ValidationError as e:
        configure_logging()
        logger.warning("Invalid logging settings, using defaults", error=str(e))

    host = GitHubActionsHost()
    asyncio.run(run(host))
    return host.exit_code
