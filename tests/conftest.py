"""
Module: conftest.py
Description: Shared pytest fixtures for Zekt action tests.

Provides test settings that ignore the process environment, an
in-memory ActionHost, and sample request data. HTTP traffic is mocked
with pytest-httpx's httpx_mock fixture in the individual tests.
"""

from typing import Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from zekt_action.config.settings import Settings
from zekt_action.host.base import InputRequiredError
from zekt_action.models.request import GitHubContext, RegisterRunRequest

API_URL = "https://api.zekt.dev"
REGISTER_URL = f"{API_URL}/api/zekt/register-run"
TEST_TOKEN = "ghp_" + "a" * 36


class FakeHost:
    """In-memory ActionHost recording outputs and failures."""

    def __init__(
        self,
        inputs: Optional[Dict[str, str]] = None,
        context: Optional[GitHubContext] = None
    ):
        self.inputs = inputs or {}
        self.context = context or GitHubContext()
        self.outputs: Dict[str, str] = {}
        self.failures: List[str] = []

    def get_input(self, name: str, required: bool = False) -> str:
        value = self.inputs.get(name, "").strip()
        if required and not value:
            raise InputRequiredError(name)
        return value

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def get_context(self) -> GitHubContext:
        return self.context

    def set_failed(self, message: str) -> None:
        self.failures.append(message)


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Disables .env loading and uses the production defaults for limits
    and retries.
    """
    return Settings(_env_file=None, zekt_api_url=API_URL)


@pytest.fixture
def github_context():
    """Provide a typical workflow execution context."""
    return GitHubContext(
        repository="owner/repo",
        workflow="CI",
        job="build",
        actor="testuser",
        event_name="push",
        ref="refs/heads/main",
        sha="abc123"
    )


@pytest.fixture
def sample_request(github_context):
    """Provide a RegisterRunRequest with a small object payload."""
    return RegisterRunRequest(
        zekt_run_id=12345,
        zekt_step_id="test-step",
        zekt_payload={"test": True},
        github_context=github_context
    )


@pytest.fixture
def action_inputs():
    """Provide a complete set of valid raw action inputs."""
    return {
        "zekt_run_id": "12345",
        "zekt_step_id": "test-step",
        "zekt_payload": '{"test": true}',
        "github_token": TEST_TOKEN,
    }


@pytest.fixture
def fake_host(action_inputs, github_context):
    """Provide a FakeHost populated with valid inputs."""
    return FakeHost(inputs=action_inputs, context=github_context)


@pytest.fixture
def no_sleep():
    """Sleep replacement that records the requested delays."""
    return AsyncMock(return_value=None)
