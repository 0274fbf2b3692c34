"""
Package: zekt_action
Description: CI step that registers a build run with the Zekt API.

Validates a JSON payload supplied by the CI job, attaches the GitHub
execution context and forwards it to the Zekt registration endpoint
with bounded retries.
"""

__version__ = "1.0.0"

USER_AGENT = f"zekt-action/{__version__}"

__all__ = ["__version__", "USER_AGENT"]
