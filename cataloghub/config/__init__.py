"""
Configuration Management.

This module provides centralized configuration using Pydantic Settings.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file
3. Default values

Example:
    from cataloghub.config import get_settings

    settings = get_settings()
    lang = settings.default_lang
"""

from cataloghub.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
