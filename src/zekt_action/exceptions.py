"""
Module: exceptions.py
Description: Error taxonomy for the Zekt action.

Configuration and input errors are terminal and raised before any
network activity. Delivery errors are terminal once the retry policy
gives up; RetryableDeliveryError never leaves the delivery engine.
"""

from typing import Optional


class ZektActionError(Exception):
    """Base class for all errors raised by the action."""


class ConfigurationError(ZektActionError):
    """Raised when the action configuration is missing or invalid."""


class InputValidationError(ZektActionError):
    """
    Raised when a caller-supplied input is missing or malformed.

    Attributes:
        field: Name of the offending input, when known
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class PayloadTooLargeError(InputValidationError):
    """Raised when the payload exceeds the maximum allowed size."""

    def __init__(self, message: str, *, size_bytes: int, max_bytes: int) -> None:
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(message, field="zekt_payload")


class InvalidPayloadError(InputValidationError):
    """Raised when the payload is not valid JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field="zekt_payload")


class RetryableDeliveryError(ZektActionError):
    """
    A delivery attempt failed in a way that may succeed on retry.

    Raised for 5xx responses, 429 rate limiting and transport failures.
    status_code is None when no response was received.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_network_error(self) -> bool:
        return self.status_code is None


class DeliveryError(ZektActionError):
    """
    Terminal delivery failure.

    Attributes:
        status_code: HTTP status of the last response (None for transport failures)
        attempts: Number of attempts made before giving up
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        attempts: int = 1
    ) -> None:
        self.status_code = status_code
        self.attempts = attempts
        super().__init__(message)
