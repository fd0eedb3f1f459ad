import asyncio
import copy
from logging import Logger
from typing import Any

from area_mcp.config import DEFAULT_AREAS

from ..utils.logging_setup import set_logger
from .config import AreaEntry, AreaField
from .errors import AreaStorageError
from .state import (
    AreaAdded,
    AreaList,
    AreasLoaded,
    Command,
    Event,
    FieldChanged,
    PersistAreas,
    check_index,
    handle_event,
)
from .storage.storage_backend import SettingsStorage


class AreaRegistry:
    """
    Owner of the ordered area list.

    Every mutation goes through ``dispatch``: the pure handlers in
    ``state.py`` compute the next list, the registry adopts it and then runs
    the resulting commands. Writes are serialized, so completion order
    matches mutation order and the last mutation's full snapshot is what
    ends up in storage.
    """

    def __init__(
        self,
        storage: SettingsStorage,
        logger: Logger | None = None,
        defaults: list[AreaEntry] | None = None,
    ):
        self.storage = storage
        self.logger = logger or set_logger()
        self.defaults = list(DEFAULT_AREAS if defaults is None else defaults)

        self._areas: AreaList = ()
        self._write_lock = asyncio.Lock()
        self._closed = False

    @property
    def areas(self) -> list[AreaEntry]:
        """Copy of the current list; edit through the registry instead."""
        return copy.deepcopy(list(self._areas))

    def __len__(self) -> int:
        return len(self._areas)

    def get(self, index: int) -> AreaEntry:
        check_index(self._areas, index)
        return copy.deepcopy(self._areas[index])

    def init(self, persisted_value: Any) -> None:
        """Adopt an already-read persisted value without touching storage."""
        self._areas, _ = handle_event(
            self._areas, AreasLoaded(persisted_value, tuple(self.defaults))
        )
        self._closed = False

    async def load(self) -> list[AreaEntry]:
        """Read persisted areas from storage and merge in the defaults."""
        data = await self.storage.read()
        if data is not None and not isinstance(data, (list, tuple)):
            self.logger.warning(
                f"Ignoring persisted areas of type {type(data).__name__}; starting empty"
            )

        self.init(data)
        self.logger.info(f"Loaded {len(self._areas)} areas")
        return self.areas

    async def dispatch(self, event: Event) -> AreaList:
        """Apply one event, run its commands, and return the list it produced."""
        self._check_open()
        updated, commands = handle_event(self._areas, event)
        self._areas = updated
        await self._run(commands)
        return updated

    async def _run(self, commands: list[Command]) -> None:
        for command in commands:
            if isinstance(command, PersistAreas):
                await self.save()
            else:
                raise ValueError(f"Unknown area command: {command!r}")

    async def add_area(self) -> int:
        """Append a blank area, persist, and return its index."""
        # Other mutations may land while the save is awaited
        added = await self.dispatch(AreaAdded())
        index = len(added) - 1
        self.logger.info(f"Added area {index}")
        return index

    async def update_field(self, index: int, field: AreaField | str, value: str) -> None:
        """Set one field of one area and persist the whole list."""
        await self.dispatch(FieldChanged(index, AreaField.parse(field), value))

    async def save(self) -> None:
        """Write the complete current list, overwriting what was stored."""
        async with self._write_lock:
            self._check_open()
            snapshot = copy.deepcopy(list(self._areas))
            try:
                await self.storage.write(snapshot)
            except Exception as e:
                self.logger.error(f"Failed to save areas: {e}")
                raise AreaStorageError(f"Failed to save areas: {e}") from e

            self.logger.debug(f"Saved {len(snapshot)} areas")

    async def shutdown(self) -> None:
        """Wait for any in-flight write, then release storage."""
        if self._closed:
            return

        self.logger.info("Shutting down area registry...")
        async with self._write_lock:
            self._closed = True
        await self.storage.close()
        self.logger.info("Area registry shut down complete")

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Area registry is shut down")


async def create_area_registry(
    storage: SettingsStorage, logger: Logger | None = None
) -> AreaRegistry:
    """Create a registry and load its persisted state."""
    await storage.initialize()
    registry = AreaRegistry(storage, logger)
    await registry.load()
    return registry
