"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from restwire.config.settings import settings

    prefix = settings.API_PREFIX
    is_dev = settings.is_development
"""

from restwire.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
