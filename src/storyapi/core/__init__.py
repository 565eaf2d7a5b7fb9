"""Core utilities and configuration for the Story API.

This module contains:
- Configuration and settings management
- Bearer token creation and verification
"""
from .config import Settings, get_settings, settings
from .security import create_access_token, decode_access_token

__all__ = [
    # Config
    "settings",
    "Settings",
    "get_settings",
    # Security - JWT
    "create_access_token",
    "decode_access_token",
]
