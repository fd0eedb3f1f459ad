import json
import os
from typing import Any, Dict

from area_mcp.areas.config import AreaServerConfig
from area_mcp.areas.storage.storage_backend import SettingsStorage


class JsonFileStorage(SettingsStorage):
    """Settings kept in a plugin data.json file inside the vault."""

    def __init__(self, config: AreaServerConfig):
        super().__init__(config)
        self.data_path = config.settings_path
        self.encoding = "utf-8"

    async def initialize(self) -> None:
        """Make sure the settings directory exists."""
        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger.info(f"JSON settings storage at {self.data_path}")

    async def read(self) -> Any | None:
        """Load data.json; a missing or unreadable file counts as no data."""
        if not self.data_path.exists():
            return None

        try:
            with open(self.data_path, "r", encoding=self.encoding) as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.warning(f"Ignoring unreadable settings file {self.data_path}: {e}")
            return None

    async def write(self, value: Any) -> None:
        """Replace data.json with ``value``."""
        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.data_path.with_name(self.data_path.name + ".tmp")

        try:
            with open(tmp_path, "w", encoding=self.encoding) as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.data_path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise

        self.logger.debug(f"Wrote settings to {self.data_path}")

    async def close(self) -> None:
        pass

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend_type": self.__class__.__name__,
            "settings_path": str(self.data_path),
            "exists": self.data_path.exists(),
        }
