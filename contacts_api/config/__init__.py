"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from contacts_api.config.settings import settings

    commands_url = settings.BLIP_COMMANDS_URL
    is_dev = settings.is_development
"""

from contacts_api.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
