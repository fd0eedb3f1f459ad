import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path


class FolderIndex(ABC):
    """
    Snapshot of the folders known to the host.

    Paths are vault-relative, "/"-separated and never include the vault
    root itself.
    """

    @abstractmethod
    def all_folder_paths(self) -> set[str]:
        """Return every currently known folder path."""
        pass


class VaultFolderIndex(FolderIndex):
    """Folder index backed by a vault directory on disk."""

    def __init__(self, vault_root: Path, include_hidden: bool = False):
        self.vault_root = Path(vault_root)
        self.include_hidden = include_hidden
        self.logger = logging.getLogger(__name__)

    def _is_hidden(self, name: str) -> bool:
        return name.startswith(".")

    def all_folder_paths(self) -> set[str]:
        """Walk the vault and collect every folder below the root."""
        if not self.vault_root.is_dir():
            self.logger.warning(f"Vault root not found: {self.vault_root}")
            return set()

        folders: set[str] = set()
        for dirpath, dirnames, _ in os.walk(self.vault_root):
            if not self.include_hidden:
                # Prune in place so os.walk never descends into .obsidian etc.
                dirnames[:] = [d for d in dirnames if not self._is_hidden(d)]

            rel_dir = Path(dirpath).relative_to(self.vault_root)
            for name in dirnames:
                folders.add((rel_dir / name).as_posix())

        return folders


class StaticFolderIndex(FolderIndex):
    """Fixed folder snapshot, for tests and for embedding hosts."""

    def __init__(self, paths: Iterable[str] = ()):
        self.paths = set(paths)

    def all_folder_paths(self) -> set[str]:
        return set(self.paths)
