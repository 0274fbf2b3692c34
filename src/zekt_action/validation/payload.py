"""
Module: payload.py
Description: Input, payload size and JSON structure validation.

All checks run before any network activity and raise subclasses of
InputValidationError with messages that name the offending input and,
where useful, the expression a workflow author should use instead.

Key Components:
- validate_inputs(): Required field presence and shape
- validate_payload_size(): Byte-size ceiling with a warning band
- validate_json(): JSON well-formedness

Dependencies: json, typing, logger
"""

import json
from typing import Any

from zekt_action.config.settings import (
    MAX_PAYLOAD_SIZE_BYTES,
    PAYLOAD_SIZE_WARNING_THRESHOLD_BYTES,
)
from zekt_action.exceptions import (
    InputValidationError,
    InvalidPayloadError,
    PayloadTooLargeError,
)
from zekt_action.models.inputs import ActionInputs
from zekt_action.models.response import PayloadValidationResult
from zekt_action.utils.formatting import format_bytes
from zekt_action.utils.logger import get_logger

logger = get_logger(__name__)


def validate_payload_size(
    payload: str,
    max_bytes: int = MAX_PAYLOAD_SIZE_BYTES,
    warning_threshold_bytes: int = PAYLOAD_SIZE_WARNING_THRESHOLD_BYTES
) -> PayloadValidationResult:
    """
    Validate payload size with a warning when close to the limit.

    Args:
        payload: Raw payload text
        max_bytes: Maximum allowed UTF-8 size
        warning_threshold_bytes: Size above which a warning is emitted

    Returns:
        PayloadValidationResult with the measured size and optional warning

    Raises:
        PayloadTooLargeError: If the payload exceeds max_bytes
    """
    size_bytes = len(payload.encode("utf-8"))

    if size_bytes > max_bytes:
        raise PayloadTooLargeError(
            f"Payload size ({format_bytes(size_bytes)}) exceeds maximum allowed size "
            f"({format_bytes(max_bytes)}). "
            f"Maximum: {format_bytes(max_bytes)} ({max_bytes:,} bytes)",
            size_bytes=size_bytes,
            max_bytes=max_bytes
        )

    if size_bytes > warning_threshold_bytes:
        percent_used = size_bytes / max_bytes * 100
        warning = (
            f"Payload size is {format_bytes(size_bytes)} ({percent_used:.1f}% of maximum). "
            f"Consider reducing payload size to avoid hitting the "
            f"{format_bytes(max_bytes)} limit."
        )
        logger.warning(warning)

        return PayloadValidationResult(valid=True, size_bytes=size_bytes, warning=warning)

    return PayloadValidationResult(valid=True, size_bytes=size_bytes)


def validate_json(payload: str) -> Any:
    """
    Parse the payload as JSON.

    Any JSON value is accepted: objects, arrays and scalars.

    Raises:
        InvalidPayloadError: If the payload is not valid JSON
    """
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise InvalidPayloadError(
            f"Invalid JSON payload: {e}. "
            "Please ensure zekt_payload contains valid JSON."
        ) from e


def validate_inputs(inputs: ActionInputs) -> None:
    """
    Validate required inputs.

    The endpoint is only checked when it was supplied explicitly as an
    input; otherwise it comes from the configuration.

    Raises:
        InputValidationError: On the first missing or malformed input
    """
    if inputs.zekt_run_id is None or inputs.zekt_run_id <= 0:
        raise InputValidationError(
            "zekt_run_id is required and must be a positive number. "
            "Use: ${{ github.run_id }}",
            field="zekt_run_id"
        )

    if not inputs.zekt_payload or not inputs.zekt_payload.strip():
        raise InputValidationError(
            "zekt_payload is required and cannot be empty. "
            "Provide a valid JSON object as a string.",
            field="zekt_payload"
        )

    if not inputs.github_token or not inputs.github_token.strip():
        raise InputValidationError(
            "github_token is required. Use: ${{ secrets.GITHUB_TOKEN }}",
            field="github_token"
        )

    if inputs.zekt_api_url is not None and not inputs.zekt_api_url.startswith(
        ('http://', 'https://')
    ):
        raise InputValidationError(
            "zekt_api_url must be a valid HTTP/HTTPS URL",
            field="zekt_api_url"
        )
