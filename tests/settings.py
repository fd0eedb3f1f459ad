"""Shared paths for the test suite."""

from pathlib import Path

TEST_DATA_DIR: Path = Path(__file__).parent / "data"
VAULT_EXAMPLE_DIR: Path = TEST_DATA_DIR / "vault_example"
