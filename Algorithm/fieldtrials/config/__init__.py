"""
Configuration module for fieldtrials.

Provides settings management and logging setup.
"""

from fieldtrials.config.settings import (
    Settings,
    get_settings,
    configure,
    configure_logging,
    reset_settings,
    DEFAULT_KEY_PREFIX,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure",
    "configure_logging",
    "reset_settings",
    "DEFAULT_KEY_PREFIX",
]
