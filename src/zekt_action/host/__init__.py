"""
Module: host
Description: Adapters for the CI platform that runs the action.
"""

from .base import ActionHost, InputRequiredError
from .github import GitHubActionsHost

__all__ = ["ActionHost", "InputRequiredError", "GitHubActionsHost"]
