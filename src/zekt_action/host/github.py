"""
Module: github.py
Description: GitHub Actions implementation of ActionHost.

Reads inputs from INPUT_<NAME> environment variables, the execution
context from GITHUB_* variables, appends outputs to the file named by
GITHUB_OUTPUT and reports failures as ::error:: workflow commands.
"""

import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

from zekt_action.host.base import InputRequiredError
from zekt_action.models.request import GitHubContext
from zekt_action.utils.logger import escape_command_data, get_logger

logger = get_logger(__name__)

# GitHubContext field -> environment variable
_CONTEXT_VARIABLES = {
    "repository": "GITHUB_REPOSITORY",
    "workflow": "GITHUB_WORKFLOW",
    "job": "GITHUB_JOB",
    "actor": "GITHUB_ACTOR",
    "event_name": "GITHUB_EVENT_NAME",
    "ref": "GITHUB_REF",
    "sha": "GITHUB_SHA",
}


def input_variable_name(name: str) -> str:
    """Environment variable GitHub Actions uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


class GitHubActionsHost:
    """
    ActionHost backed by the GitHub Actions runner environment.

    Attributes:
        exit_code: 1 once set_failed() has been called, otherwise 0
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None
    ):
        self.environ = os.environ if environ is None else environ
        self.stdout = stdout or sys.stdout
        self.exit_code = 0

    def get_input(self, name: str, required: bool = False) -> str:
        value = self.environ.get(input_variable_name(name), "").strip()
        if required and not value:
            raise InputRequiredError(name)
        return value

    def get_context(self) -> GitHubContext:
        return GitHubContext(**{
            field: self.environ.get(variable, "")
            for field, variable in _CONTEXT_VARIABLES.items()
        })

    def set_output(self, name: str, value: str) -> None:
        output_file = self.environ.get("GITHUB_OUTPUT")
        if not output_file:
            # Runners without GITHUB_OUTPUT only understand the legacy command
            self.stdout.write(f"::set-output name={name}::{escape_command_data(value)}\n")
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

        logger.debug("Output set", name=name)

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self.stdout.write(f"::error::{escape_command_data(message)}\n")
        self.stdout.flush()
