"""
Module: request.py
Description: Outbound request models for the Zekt registration API.

Defines the execution context attached to every registration and the
request body posted to the register-run endpoint.

Key Components:
- GitHubContext: Metadata describing the CI run
- RegisterRunRequest: Body of POST /api/zekt/register-run
- build_register_run_request(): Assembles a request from validated input

Dependencies: pydantic, typing
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GitHubContext(BaseModel):
    """
    Execution context of the workflow run.

    Supplied wholesale by the host environment and forwarded as-is;
    none of the fields are parsed or validated.
    """

    model_config = ConfigDict(frozen=True)

    repository: str = Field(default="", description="owner/repo")
    workflow: str = Field(default="", description="Workflow name")
    job: str = Field(default="", description="Job identifier")
    actor: str = Field(default="", description="User that triggered the run")
    event_name: str = Field(default="", description="Triggering event name")
    ref: str = Field(default="", description="Git ref")
    sha: str = Field(default="", description="Commit SHA")


class RegisterRunRequest(BaseModel):
    """
    Request body for registering a run with Zekt.

    Attributes:
        zekt_run_id: Positive numeric run identifier
        zekt_step_id: Step identifier within the run
        zekt_payload: Parsed JSON payload (any JSON value)
        github_context: Execution context of the workflow run
    """

    model_config = ConfigDict(frozen=True)

    zekt_run_id: int = Field(..., gt=0, description="Zekt run identifier")
    zekt_step_id: str = Field(..., min_length=1, description="Zekt step identifier")
    zekt_payload: Any = Field(..., description="Parsed JSON payload")
    github_context: GitHubContext = Field(..., description="Workflow execution context")


def build_register_run_request(
    run_id: int,
    step_id: str,
    payload: Any,
    context: GitHubContext
) -> RegisterRunRequest:
    """Assemble the outbound request from validated inputs and host context."""
    return RegisterRunRequest(
        zekt_run_id=run_id,
        zekt_step_id=step_id,
        zekt_payload=payload,
        github_context=context
    )
