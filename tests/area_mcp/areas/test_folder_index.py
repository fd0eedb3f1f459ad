from pathlib import Path

from area_mcp.areas.vault.folder_index import StaticFolderIndex, VaultFolderIndex
from tests.settings import VAULT_EXAMPLE_DIR

"""
test_folder_index.py
--------------------
Tests for folder enumeration over a vault directory.
"""


def test_example_vault_folders():
    folders = VaultFolderIndex(VAULT_EXAMPLE_DIR).all_folder_paths()
    assert folders == {
        "Inbox",
        "Projects",
        "Projects/2024",
        "Projects/2025",
        "Resources",
        "Resources/Images",
    }


def test_hidden_folders_skipped_by_default(tmp_path: Path):
    (tmp_path / ".obsidian" / "plugins").mkdir(parents=True)
    (tmp_path / "Notes" / ".trash").mkdir(parents=True)

    assert VaultFolderIndex(tmp_path).all_folder_paths() == {"Notes"}


def test_hidden_folders_included_on_request(tmp_path: Path):
    (tmp_path / ".obsidian" / "plugins").mkdir(parents=True)

    folders = VaultFolderIndex(tmp_path, include_hidden=True).all_folder_paths()
    assert folders == {".obsidian", ".obsidian/plugins"}


def test_root_never_listed(tmp_path: Path):
    assert VaultFolderIndex(tmp_path).all_folder_paths() == set()


def test_missing_vault_is_empty(tmp_path: Path):
    assert VaultFolderIndex(tmp_path / "nope").all_folder_paths() == set()


def test_index_reflects_new_folders(tmp_path: Path):
    index = VaultFolderIndex(tmp_path)
    assert index.all_folder_paths() == set()

    (tmp_path / "Later").mkdir()
    assert index.all_folder_paths() == {"Later"}


def test_static_index_returns_copy():
    index = StaticFolderIndex(["A", "B"])
    index.all_folder_paths().add("C")
    assert index.all_folder_paths() == {"A", "B"}
