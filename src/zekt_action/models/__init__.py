"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains all data models used by the action:
- ActionInputs: Caller-supplied inputs
- GitHubContext: Workflow execution context
- RegisterRunRequest: Body posted to the Zekt API
- PayloadValidationResult: Outcome of the payload size check
- DeliveryOutcome: Parsed Zekt API response

All models are exported here for convenient importing.
"""

from .inputs import ActionInputs, DEFAULT_STEP_ID, parse_run_id
from .request import GitHubContext, RegisterRunRequest, build_register_run_request
from .response import DeliveryOutcome, PayloadValidationResult

__all__ = [
    "ActionInputs",
    "DEFAULT_STEP_ID",
    "parse_run_id",
    "GitHubContext",
    "RegisterRunRequest",
    "build_register_run_request",
    "DeliveryOutcome",
    "PayloadValidationResult",
]
