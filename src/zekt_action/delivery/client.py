"""
Module: delivery/client.py
Description: HTTP client for the Zekt register-run endpoint.

Posts a RegisterRunRequest with bearer authentication, classifies the
response as success, retryable or terminal, and retries through the
policy in delivery/retry.py. Every error message leaving this module
has been passed through the redactor.
"""

import asyncio
from typing import Dict

import httpx

from zekt_action import USER_AGENT
from zekt_action.config.settings import Settings
from zekt_action.delivery.retry import SleepFn, registration_retrying
from zekt_action.exceptions import DeliveryError, RetryableDeliveryError
from zekt_action.models.request import RegisterRunRequest
from zekt_action.models.response import DeliveryOutcome
from zekt_action.utils.logger import get_logger
from zekt_action.utils.redaction import redact_sensitive_info

logger = get_logger(__name__)

REGISTER_RUN_PATH = "/api/zekt/register-run"


def is_retryable_status(status_code: int) -> bool:
    """5xx responses and 429 rate limiting are worth retrying."""
    return status_code >= 500 or status_code == 429


class RegistrationClient:
    """
    HTTP client for registering runs with Zekt.

    Retries server-side failures with exponential backoff and fails
    immediately on client errors.
    """

    def __init__(
        self,
        api_url: str,
        max_attempts: int = 3,
        retry_delay_ms: int = 1000,
        timeout_seconds: float = 30.0,
        sleep: SleepFn = asyncio.sleep
    ):
        """
        Initialize the registration client.

        Args:
            api_url: Base URL of the Zekt API
            max_attempts: Total number of attempts, including the first
            retry_delay_ms: Delay before the first retry in milliseconds
            timeout_seconds: HTTP timeout for each attempt
            sleep: Coroutine used to wait between attempts

        Raises:
            ValueError: If api_url is invalid or max_attempts is below 1
        """
        if not api_url or not isinstance(api_url, str):
            raise ValueError("api_url must be a non-empty string")
        if not api_url.startswith(('http://', 'https://')):
            raise ValueError("api_url must be a valid HTTP/HTTPS URL")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.register_url = api_url.rstrip('/') + REGISTER_RUN_PATH
        self.max_attempts = max_attempts
        self.retry_delay_ms = retry_delay_ms
        self.timeout = httpx.Timeout(timeout_seconds)
        self._sleep = sleep

        logger.debug(
            "Registration client initialized",
            register_url=self.register_url,
            max_attempts=max_attempts,
            timeout_seconds=timeout_seconds
        )

    @classmethod
    def from_settings(cls, settings: Settings, sleep: SleepFn = asyncio.sleep) -> "RegistrationClient":
        return cls(
            settings.zekt_api_url,
            max_attempts=settings.max_retries,
            retry_delay_ms=settings.retry_delay_ms,
            timeout_seconds=settings.request_timeout_seconds,
            sleep=sleep
        )

    def _build_headers(self, request: RegisterRunRequest, github_token: str) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {github_token}',
            'X-GitHub-Repository': request.github_context.repository,
            'X-GitHub-Run-ID': str(request.zekt_run_id),
            'User-Agent': USER_AGENT,
        }

    @staticmethod
    def _parse_response(response: httpx.Response) -> DeliveryOutcome:
        """Parse the response body, synthesizing a failure when it is not an outcome."""
        try:
            return DeliveryOutcome.model_validate(response.json())
        except ValueError:
            # Not JSON, or not an object with a usable success flag
            return DeliveryOutcome(
                success=False,
                error=f"HTTP {response.status_code}: {response.reason_phrase}"
            )

    async def register_run(self, request: RegisterRunRequest, github_token: str) -> DeliveryOutcome:
        """
        Send the request to Zekt, retrying transient failures.

        Args:
            request: Request to register
            github_token: Bearer credential

        Returns:
            The parsed outcome of the first 2xx response

        Raises:
            DeliveryError: On a non-retryable response, or once all
                attempts have failed
        """
        body = request.model_dump(mode="json")
        headers = self._build_headers(request, github_token)

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                async for attempt in registration_retrying(
                    self.max_attempts, self.retry_delay_ms, sleep=self._sleep
                ):
                    with attempt:
                        outcome = await self._attempt(
                            client, body, headers, attempt.retry_state.attempt_number
                        )
            except RetryableDeliveryError as e:
                raise DeliveryError(
                    str(e),
                    status_code=e.status_code,
                    attempts=self.max_attempts
                ) from e

        return outcome

    async def _attempt(
        self,
        client: httpx.AsyncClient,
        body: dict,
        headers: Dict[str, str],
        attempt: int
    ) -> DeliveryOutcome:
        logger.debug(
            "Sending registration request",
            attempt=attempt,
            max_attempts=self.max_attempts,
            url=self.register_url
        )

        try:
            response = await client.post(self.register_url, json=body, headers=headers)
        except httpx.RequestError as e:
            raise RetryableDeliveryError(
                redact_sensitive_info(str(e) or type(e).__name__)
            ) from e

        outcome = self._parse_response(response)

        if response.is_success:
            logger.info(
                "Registration request accepted",
                status_code=response.status_code,
                attempt=attempt,
                success=outcome.success
            )
            return outcome

        message = redact_sensitive_info(
            outcome.error or f"HTTP {response.status_code}: {response.reason_phrase}"
        )

        if is_retryable_status(response.status_code):
            raise RetryableDeliveryError(message, status_code=response.status_code)

        logger.warning(
            "Registration rejected by API",
            status_code=response.status_code,
            error=message
        )
        raise DeliveryError(message, status_code=response.status_code, attempts=attempt)
