"""
Module: base.py
Description: Interface between the action and the CI platform running it.

The pipeline only talks to its host through this protocol, so it can be
driven by GitHub Actions in production and by an in-memory fake in tests.
"""

from typing import Protocol

from zekt_action.models.request import GitHubContext


class InputRequiredError(ValueError):
    """Raised by a host when a required input was not supplied."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class ActionHost(Protocol):
    """Named string inputs in, named string outputs and a failure signal out."""

    def get_input(self, name: str, required: bool = False) -> str:
        """
        Return the trimmed value of an input, or "" when absent.

        Raises:
            InputRequiredError: If required is set and the input is empty
        """
        ...

    def set_output(self, name: str, value: str) -> None:
        ...

    def get_context(self) -> GitHubContext:
        ...

    def set_failed(self, message: str) -> None:
        """Report the run as failed with the given message."""
        ...
