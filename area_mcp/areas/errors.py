"""Errors raised by the area registry."""


class AreaRegistryError(Exception):
    """Base class for area registry failures."""


class AreaIndexError(AreaRegistryError, IndexError):
    """An area index does not point at an existing entry."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Area index {index} out of range (have {length} areas)")


class AreaStorageError(AreaRegistryError):
    """Writing the area list to storage failed."""
