"""
Package: delivery
Description: Delivery of run registrations to the Zekt API.

Provides the HTTP registration client and the retry policy for
handling transient delivery failures.
"""

from .client import RegistrationClient

__all__ = ["RegistrationClient"]
