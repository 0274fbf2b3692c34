"""
Module: config
Description: Action configuration loaded from the environment.
"""

from .settings import LoggingSettings, Settings, load_settings

__all__ = ["LoggingSettings", "Settings", "load_settings"]
