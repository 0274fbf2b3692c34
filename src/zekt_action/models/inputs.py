"""
Module: inputs.py
Description: Caller-supplied action inputs.

The host hands inputs over as strings. ActionInputs keeps them
mostly raw so that validate_inputs() can report each problem with a
field-specific message.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STEP_ID = "default"


def parse_run_id(raw: Optional[str]) -> Optional[int]:
    """Parse a run identifier, returning None when it is not an integer."""
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


class ActionInputs(BaseModel):
    """
    Inputs of a single action invocation.

    Attributes:
        zekt_run_id: Parsed run identifier, None when absent or not numeric
        zekt_step_id: Step identifier, "default" when not supplied
        zekt_payload: Raw payload text expected to contain JSON
        github_token: Bearer credential for the Zekt API
        zekt_api_url: Explicit endpoint override, None when not supplied
    """

    model_config = ConfigDict(frozen=True)

    zekt_run_id: Optional[int] = None
    zekt_step_id: str = Field(default=DEFAULT_STEP_ID)
    zekt_payload: str = ""
    github_token: str = Field(default="", repr=False)
    zekt_api_url: Optional[str] = None
