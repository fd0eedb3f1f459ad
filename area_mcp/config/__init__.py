"""
Configuration module for area-mcp.

This module provides centralized configuration constants
used across the entire project.
"""

from .settings import (
    DEFAULT_AREAS,
    PLUGIN_ID,
    ROOT_FOLDER,
    SETTINGS_FILE_NAME,
    VAULT_DIR,
)

__all__ = [
    "DEFAULT_AREAS",
    "PLUGIN_ID",
    "ROOT_FOLDER",
    "SETTINGS_FILE_NAME",
    "VAULT_DIR",
]
