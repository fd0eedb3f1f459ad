from area_mcp.areas.config import AreaServerConfig
from area_mcp.areas.storage.storage_backend import SettingsStorage


def create_settings_storage(config: AreaServerConfig) -> SettingsStorage:
    """
    Factory function to create settings storage instances.

    Args:
        config: Area server configuration

    Returns:
        JsonFileStorage for "json", MemoryStorage for "memory"
    """
    from area_mcp.areas.storage.json_file import JsonFileStorage
    from area_mcp.areas.storage.memory import MemoryStorage

    storage_type = config.storage_type.lower()
    if storage_type == "json":
        return JsonFileStorage(config)
    elif storage_type == "memory":
        return MemoryStorage(config)
    raise ValueError(f"Unknown storage type: {config.storage_type}")
