from .config import (
    AreaConfig,
    AreaField,
    AreaServerConfig,
    load_config_from_env,
    new_area,
)
from .errors import AreaIndexError, AreaRegistryError, AreaStorageError
from .registry import AreaRegistry, create_area_registry
from .settings_view import SettingsPage, area_label, build_settings_page, render_text
from .storage import JsonFileStorage, MemoryStorage, SettingsStorage, create_settings_storage
from .suggest import FolderSuggest, FolderSuggestionEngine, TextInput
from .vault import FolderIndex, StaticFolderIndex, VaultFolderIndex

# Main exports
__all__ = [
    # Main classes
    "AreaRegistry",
    "AreaServerConfig",
    "AreaConfig",
    "AreaField",
    "FolderSuggestionEngine",
    # Collaborators
    "SettingsStorage",
    "JsonFileStorage",
    "MemoryStorage",
    "FolderIndex",
    "VaultFolderIndex",
    "StaticFolderIndex",
    # UI binding
    "FolderSuggest",
    "TextInput",
    "SettingsPage",
    # Errors
    "AreaRegistryError",
    "AreaIndexError",
    "AreaStorageError",
    # Convenience functions
    "area_label",
    "build_settings_page",
    "create_area_registry",
    "create_settings_storage",
    "load_config_from_env",
    "new_area",
    "render_text",
]

# Package metadata
AREA_FIELDS = [f.value for f in AreaField]
SUPPORTED_STORAGE = ["json", "memory"]
