"""
Path and constant configurations for area-mcp.

This module defines the core paths and constants used throughout
the area-mcp project, including the vault location and the defaults
merged into persisted area settings.
"""

from pathlib import Path

# Vault root - every folder suggestion is relative to this directory
VAULT_DIR: Path = Path("data/vault")

# Plugin folder under <vault>/.obsidian/plugins/ holding the settings file
PLUGIN_ID: str = "multi-vault-config"
SETTINGS_FILE_NAME: str = "data.json"

# Synthetic entry offered first in every folder suggestion list
ROOT_FOLDER: str = "/"

# Built-in areas appended after whatever was persisted
DEFAULT_AREAS: list[dict[str, str]] = []
