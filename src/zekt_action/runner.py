"""
Module: runner.py
Description: Main action logic.

Sequences input validation, payload checks, request construction and
delivery, then maps the result onto the action outputs. Any failure
short-circuits the remaining stages and is reported once, redacted,
through the host's failure signal.
"""

import asyncio
from typing import Optional

from zekt_action.config.settings import Settings, load_settings
from zekt_action.delivery.client import RegistrationClient
from zekt_action.delivery.retry import SleepFn
from zekt_action.exceptions import DeliveryError
from zekt_action.host.base import ActionHost
from zekt_action.models.inputs import DEFAULT_STEP_ID, ActionInputs, parse_run_id
from zekt_action.models.request import build_register_run_request
from zekt_action.utils.formatting import format_bytes
from zekt_action.utils.logger import get_logger
from zekt_action.utils.redaction import redact_sensitive_info
from zekt_action.validation.payload import (
    validate_inputs,
    validate_json,
    validate_payload_size,
)

logger = get_logger(__name__)


def read_inputs(host: ActionHost) -> ActionInputs:
    """Read the action inputs from the host."""
    return ActionInputs(
        zekt_run_id=parse_run_id(host.get_input("zekt_run_id", required=True)),
        zekt_step_id=host.get_input("zekt_step_id") or DEFAULT_STEP_ID,
        zekt_payload=host.get_input("zekt_payload", required=True),
        github_token=host.get_input("github_token", required=True),
        zekt_api_url=host.get_input("zekt_api_url") or None
    )


def _resolve_settings(inputs: ActionInputs, settings: Optional[Settings]) -> Settings:
    overrides = {"zekt_api_url": inputs.zekt_api_url} if inputs.zekt_api_url else {}
    if settings is None:
        return load_settings(**overrides)
    if overrides:
        return settings.model_copy(update=overrides)
    return settings


async def run(
    host: ActionHost,
    settings: Optional[Settings] = None,
    sleep: SleepFn = asyncio.sleep
) -> bool:
    """
    Register one run with Zekt.

    Args:
        host: CI platform adapter supplying inputs and consuming outputs
        settings: Preloaded settings; loaded from the environment when None
        sleep: Coroutine used to wait between delivery attempts

    Returns:
        True if the run was registered, False if the action failed
    """
    try:
        inputs = read_inputs(host)

        logger.info("Validating inputs...")
        validate_inputs(inputs)

        settings = _resolve_settings(inputs, settings)

        logger.info("Validating payload size...")
        size_validation = validate_payload_size(
            inputs.zekt_payload,
            max_bytes=settings.max_payload_size_bytes,
            warning_threshold_bytes=settings.payload_size_warning_threshold_bytes
        )
        logger.info(f"Payload size: {format_bytes(size_validation.size_bytes)}")

        logger.info("Validating JSON structure...")
        parsed_payload = validate_json(inputs.zekt_payload)

        request = build_register_run_request(
            inputs.zekt_run_id,
            inputs.zekt_step_id,
            parsed_payload,
            host.get_context()
        )

        logger.info(
            "Sending payload to Zekt",
            run_id=inputs.zekt_run_id,
            step_id=inputs.zekt_step_id
        )
        client = RegistrationClient.from_settings(settings, sleep=sleep)
        outcome = await client.register_run(request, inputs.github_token)

        if not outcome.success:
            raise DeliveryError(
                redact_sensitive_info(
                    outcome.error or "Zekt API did not confirm the registration"
                )
            )

        host.set_output("success", "true")
        host.set_output("run_id", str(inputs.zekt_run_id))
        host.set_output("step_id", inputs.zekt_step_id)
        host.set_output("error_message", "")

        logger.info(f"Successfully registered run {inputs.zekt_run_id} with Zekt")
        logger.info(f"Message: {outcome.message or 'Payload registered successfully'}")
        return True

    except Exception as e:
        error_message = redact_sensitive_info(str(e) or type(e).__name__)

        logger.debug(
            "Run registration failed",
            error_type=type(e).__name__,
            error=error_message
        )

        host.set_output("success", "false")
        host.set_output("error_message", error_message)
        host.set_failed(f"Failed to register run with Zekt: {error_message}")
        return False
