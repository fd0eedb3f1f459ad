import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypedDict

from area_mcp.config import PLUGIN_ID, SETTINGS_FILE_NAME, VAULT_DIR


class AreaField(str, Enum):
    """Editable fields of an area. Values are the persisted key names."""

    AREA_PATH = "areaPath"
    IMAGE_PATH = "imagePath"
    NOTE_PATH = "notePath"

    @classmethod
    def parse(cls, name: "str | AreaField") -> "AreaField":
        """Resolve a persisted key name (or an AreaField) to an AreaField."""
        try:
            return cls(name)
        except ValueError as e:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown area field: {name!r} (expected one of {valid})") from e


class AreaConfig(TypedDict):
    """One area binding, stored exactly as it is persisted."""

    areaPath: str
    imagePath: str
    notePath: str


# Persisted entries are not validated, so the list may hold anything JSON can.
AreaEntry = Any


def new_area() -> AreaConfig:
    """Create a blank area with every path empty."""
    return {
        AreaField.AREA_PATH.value: "",
        AreaField.IMAGE_PATH.value: "",
        AreaField.NOTE_PATH.value: "",
    }


@dataclass
class AreaServerConfig:
    """Configuration for the area server."""

    # Paths
    vault_root: Path = field(default_factory=lambda: VAULT_DIR)
    settings_path: Path | None = None

    # Storage settings
    storage_type: str = "json"  # json or memory

    # Folder index settings
    include_hidden_folders: bool = False

    # Logging
    log_level: int = logging.INFO

    def __post_init__(self):
        """Post-initialization setup."""
        self.vault_root = Path(self.vault_root)

        self._adjust_for_environment()

        if self.settings_path is None:
            self.settings_path = self.default_settings_path
        self.settings_path = Path(self.settings_path)

    def _adjust_for_environment(self):
        """Override with environment variables if set."""
        if vault_root := os.getenv("AREA_MCP_VAULT_ROOT"):
            self.vault_root = Path(vault_root)

        if settings_path := os.getenv("AREA_MCP_SETTINGS_PATH"):
            self.settings_path = Path(settings_path)

        if storage := os.getenv("AREA_MCP_STORAGE"):
            self.storage_type = storage.lower()

        if hidden_str := os.getenv("AREA_MCP_INCLUDE_HIDDEN"):
            self.include_hidden_folders = hidden_str.lower() in ("true", "1", "yes")

        if level := os.getenv("AREA_MCP_LOG_LEVEL"):
            self.log_level = logging.getLevelName(level.upper())
            if not isinstance(self.log_level, int):
                raise ValueError(f"Invalid AREA_MCP_LOG_LEVEL: {level}")

    @property
    def default_settings_path(self) -> Path:
        """Where the host keeps this plugin's data.json inside the vault."""
        return self.vault_root / ".obsidian" / "plugins" / PLUGIN_ID / SETTINGS_FILE_NAME

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "vault_root": str(self.vault_root),
            "settings_path": str(self.settings_path),
            "storage_type": self.storage_type,
            "include_hidden_folders": self.include_hidden_folders,
            "log_level": logging.getLevelName(self.log_level),
        }


def load_config_from_env() -> AreaServerConfig:
    """Load configuration with environment variable overrides."""
    return AreaServerConfig()
