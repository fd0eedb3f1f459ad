from .folder_index import FolderIndex, StaticFolderIndex, VaultFolderIndex

__all__ = ["FolderIndex", "StaticFolderIndex", "VaultFolderIndex"]
