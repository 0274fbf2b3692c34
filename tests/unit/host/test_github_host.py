"""
Module: test_github_host.py
Description: Unit tests for the GitHub Actions host adapter.
"""

import io

import pytest

from zekt_action.host.base import InputRequiredError
from zekt_action.host.github import GitHubActionsHost, input_variable_name


class TestGitHubActionsHost:
    """Test cases for GitHubActionsHost."""

    def test_input_variable_name(self):
        assert input_variable_name("zekt_run_id") == "INPUT_ZEKT_RUN_ID"
        assert input_variable_name("my input") == "INPUT_MY_INPUT"

    def test_get_input_trims_whitespace(self):
        host = GitHubActionsHost(environ={"INPUT_ZEKT_STEP_ID": "  build  "})

        assert host.get_input("zekt_step_id") == "build"

    def test_get_input_missing_returns_empty(self):
        host = GitHubActionsHost(environ={})

        assert host.get_input("zekt_step_id") == ""

    def test_get_input_required(self):
        """Test a missing required input raises InputRequiredError."""
        host = GitHubActionsHost(environ={"INPUT_ZEKT_PAYLOAD": "   "})

        with pytest.raises(InputRequiredError, match="Input required and not supplied: zekt_payload"):
            host.get_input("zekt_payload", required=True)

    def test_get_context(self):
        """Test the execution context is read from GITHUB_* variables."""
        host = GitHubActionsHost(environ={
            "GITHUB_REPOSITORY": "owner/repo",
            "GITHUB_WORKFLOW": "CI",
            "GITHUB_JOB": "build",
            "GITHUB_ACTOR": "testuser",
            "GITHUB_EVENT_NAME": "push",
            "GITHUB_REF": "refs/heads/main",
            "GITHUB_SHA": "abc123",
        })

        context = host.get_context()

        assert context.repository == "owner/repo"
        assert context.workflow == "CI"
        assert context.job == "build"
        assert context.actor == "testuser"
        assert context.event_name == "push"
        assert context.ref == "refs/heads/main"
        assert context.sha == "abc123"

    def test_get_context_defaults_to_empty_strings(self):
        context = GitHubActionsHost(environ={}).get_context()

        assert context.repository == ""
        assert context.sha == ""

    def test_set_output_writes_github_output_file(self, tmp_path):
        """Test outputs use the heredoc delimiter format."""
        output_file = tmp_path / "github_output"
        output_file.write_text("")
        host = GitHubActionsHost(environ={"GITHUB_OUTPUT": str(output_file)})

        host.set_output("success", "true")
        host.set_output("error_message", "")

        lines = output_file.read_text().splitlines()
        assert lines[0].startswith("success<<ghadelimiter_")
        assert lines[1] == "true"
        assert lines[2] == lines[0].split("<<", 1)[1]
        assert lines[3].startswith("error_message<<ghadelimiter_")
        assert lines[4] == ""

    def test_set_output_without_output_file(self):
        """Test the legacy set-output command is used as a fallback."""
        stdout = io.StringIO()
        host = GitHubActionsHost(environ={}, stdout=stdout)

        host.set_output("run_id", "12345")

        assert stdout.getvalue() == "::set-output name=run_id::12345\n"

    def test_set_failed(self):
        """Test failures emit an escaped error command and set the exit code."""
        stdout = io.StringIO()
        host = GitHubActionsHost(environ={}, stdout=stdout)

        assert host.exit_code == 0
        host.set_failed("Failed: 100% broken\nsecond line")

        assert host.exit_code == 1
        assert stdout.getvalue() == "::error::Failed: 100%25 broken%0Asecond line\n"
