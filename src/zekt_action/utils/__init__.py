"""
Module: utils
Description: Package initialization for utility functions.

Shared helpers used throughout the action:
- logger: Structured logging configuration and helpers
- redaction: Credential scrubbing for logs and errors
- formatting: Human-readable byte sizes
"""

from .formatting import format_bytes
from .redaction import redact_sensitive_info

__all__ = [
    "format_bytes",
    "redact_sensitive_info",
]
