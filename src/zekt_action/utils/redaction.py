"""
Module: redaction.py
Description: Scrub credential-shaped substrings from text.

Applied to every error message and upstream error text before it is
logged or written to the action outputs, so tokens never reach CI logs.
"""

import re
from typing import Any

REDACTED = "[REDACTED]"

# GitHub personal, OAuth, server-to-server and user-to-server tokens
_TOKEN_PATTERNS = [
    (re.compile(rf"{prefix}[a-zA-Z0-9]{{36}}"), f"{prefix}{REDACTED}")
    for prefix in ("ghp_", "gho_", "ghs_", "ghu_")
]

_BEARER_PATTERN = re.compile(r"Bearer\s+[a-zA-Z0-9_-]+")


def redact_sensitive_info(message: Any) -> str:
    """
    Redact token patterns from a message.

    Idempotent: redacting already redacted text returns it unchanged.

    Args:
        message: Text to scrub; non-string values are converted with str()

    Returns:
        The message with every recognised credential replaced
    """
    if message is None:
        return ""
    redacted = message if isinstance(message, str) else str(message)

    for pattern, replacement in _TOKEN_PATTERNS:
        redacted = pattern.sub(replacement, redacted)

    return _BEARER_PATTERN.sub(f"Bearer {REDACTED}", redacted)
