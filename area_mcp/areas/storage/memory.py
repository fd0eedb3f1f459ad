import copy
from typing import Any

from area_mcp.areas.config import AreaServerConfig
from area_mcp.areas.storage.storage_backend import SettingsStorage


class MemoryStorage(SettingsStorage):
    """Simple in-memory settings storage for development and testing."""

    def __init__(self, config: AreaServerConfig | None = None, initial: Any = None):
        super().__init__(config or AreaServerConfig(storage_type="memory"))
        self._value = copy.deepcopy(initial)
        self.write_count = 0

    async def initialize(self) -> None:
        self.logger.info("Memory settings storage initialized")

    async def read(self) -> Any | None:
        return copy.deepcopy(self._value)

    async def write(self, value: Any) -> None:
        self._value = copy.deepcopy(value)
        self.write_count += 1

    async def close(self) -> None:
        pass
