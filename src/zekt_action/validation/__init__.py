"""
Module: validation
Description: Pre-flight checks run before anything is sent to Zekt.
"""

from .payload import validate_inputs, validate_json, validate_payload_size

__all__ = [
    "validate_inputs",
    "validate_json",
    "validate_payload_size",
]
