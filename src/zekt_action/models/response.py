"""
Module: response.py
Description: Result models produced by the validation and delivery stages.

Key Components:
- PayloadValidationResult: Outcome of the payload size check
- DeliveryOutcome: Parsed response of the Zekt registration API

Dependencies: pydantic, typing
"""

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class PayloadValidationResult(BaseModel):
    """
    Result of a payload size check.

    Attributes:
        valid: Whether the payload is within the size limit
        size_bytes: UTF-8 encoded size of the payload
        warning: Set when the payload is close to the limit
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    size_bytes: int = Field(..., ge=0)
    warning: Optional[str] = None


class DeliveryOutcome(BaseModel):
    """
    Response of the register-run endpoint.

    Only the success flag and the optional echo and message fields are
    read; anything else the server returns is ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    success: bool = Field(default=False, description="Whether the run was registered")
    run_id: Optional[int] = Field(default=None, description="Echoed run identifier")
    step_id: Optional[str] = Field(default=None, description="Echoed step identifier")
    message: Optional[str] = Field(default=None, description="Human-readable message")
    error: Optional[str] = Field(default=None, description="Error description")

    @field_validator('run_id', 'step_id', 'message', 'error', mode='wrap')
    @classmethod
    def drop_invalid_optional(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        """Discard optional fields the server sent with an unexpected type."""
        try:
            return handler(v)
        except ValidationError:
            return None
