from .json_file import JsonFileStorage
from .memory import MemoryStorage
from .settings_store import create_settings_storage
from .storage_backend import SettingsStorage

__all__ = [
    "SettingsStorage",
    "JsonFileStorage",
    "MemoryStorage",
    "create_settings_storage",
]
