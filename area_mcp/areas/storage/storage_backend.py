import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from area_mcp.areas.config import AreaServerConfig


class SettingsStorage(ABC):
    """
    Abstract base class defining the interface for all settings storage backends.

    This is the host's key-value load/save facility as seen by the registry:
    one persisted value, read whole and overwritten whole.
    """

    def __init__(self, config: AreaServerConfig):
        self.config = config
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend."""
        pass

    @abstractmethod
    async def read(self) -> Any | None:
        """
        Read the persisted value.

        Returns:
            The stored value, or None when nothing has been stored yet
        """
        pass

    @abstractmethod
    async def write(self, value: Any) -> None:
        """
        Overwrite the persisted value.

        Args:
            value: JSON-serializable value to store
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the storage and cleanup resources."""
        pass

    def get_stats(self) -> Dict[str, Any]:
        """Get basic information about the storage backend."""
        return {
            "backend_type": self.__class__.__name__,
        }
