import logging
from collections.abc import Callable

from area_mcp.config import ROOT_FOLDER

from .vault.folder_index import FolderIndex


class FolderSuggestionEngine:
    """
    Folder-path autocomplete shared by every path field.

    The folder list is rebuilt from the index on each request so it always
    reflects the current vault layout.
    """

    def __init__(self, folder_index: FolderIndex):
        self.folder_index = folder_index
        self.logger = logging.getLogger(__name__)

    def list_folders(self) -> list[str]:
        """Sorted folder paths with the vault root first."""
        folders = sorted(self.folder_index.all_folder_paths())
        return [ROOT_FOLDER, *folders]

    def suggest(self, query: str) -> list[str]:
        """Folders whose path contains ``query``, ignoring case."""
        needle = query.lower()
        suggestions = [path for path in self.list_folders() if needle in path.lower()]

        self.logger.debug(f"{len(suggestions)} folder suggestions for '{query}'")
        return suggestions

    def render(self, item: str) -> str:
        return item


class TextInput:
    """Single-line text field as the host exposes it."""

    def __init__(self, value: str = "", placeholder: str = ""):
        self.value = value
        self.placeholder = placeholder
        self._listeners: list[Callable[[str], None]] = []

    def on_change(self, callback: Callable[[str], None]) -> "TextInput":
        self._listeners.append(callback)
        return self

    def set_value(self, value: str) -> None:
        self.value = value
        for callback in self._listeners:
            callback(value)


class FolderSuggest:
    """
    Suggestion popup attached to exactly one text input.

    ``on_input`` runs on every keystroke; ``select`` writes the chosen
    folder back into the input and dismisses the popup.
    """

    def __init__(self, engine: FolderSuggestionEngine, text_input: TextInput):
        self.engine = engine
        self.text_input = text_input
        self.suggestions: list[str] = []
        self.is_open = False

    def on_input(self) -> list[str]:
        self.suggestions = self.engine.suggest(self.text_input.value)
        self.is_open = True
        return self.suggestions

    def rendered(self) -> list[str]:
        return [self.engine.render(item) for item in self.suggestions]

    def select(self, value: str) -> None:
        self.text_input.set_value(value)
        self.close()

    def close(self) -> None:
        self.suggestions = []
        self.is_open = False
