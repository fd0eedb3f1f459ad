"""
Pure event handlers for the area list.

Each handler takes the current list and an event and returns the next list
together with the commands the owner must run. Nothing here touches storage
or a UI toolkit; AreaRegistry applies the result and runs the commands.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from .config import AreaEntry, AreaField, new_area
from .errors import AreaIndexError

AreaList = tuple[AreaEntry, ...]


# Events


@dataclass(frozen=True)
class AreasLoaded:
    """Persisted data arrived from storage."""

    persisted: Any
    defaults: Sequence[AreaEntry] = ()


@dataclass(frozen=True)
class AreaAdded:
    """The user asked for a new blank area."""


@dataclass(frozen=True)
class FieldChanged:
    """The user edited one path field of one area."""

    index: int
    field: AreaField
    value: str


Event = Union[AreasLoaded, AreaAdded, FieldChanged]


# Commands


@dataclass(frozen=True)
class PersistAreas:
    """Write the complete list to storage."""

    areas: AreaList


Command = PersistAreas


def merge_persisted(persisted: Any, defaults: Sequence[AreaEntry] = ()) -> AreaList:
    """
    Combine persisted data with the built-in defaults.

    Anything that is not a list counts as no prior data. Entries are kept
    as they were stored, malformed or not.
    """
    stored = persisted if isinstance(persisted, (list, tuple)) else ()
    return tuple(stored) + tuple(defaults)


def check_index(areas: AreaList, index: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Area index must be an int, got {type(index).__name__}")
    if not 0 <= index < len(areas):
        raise AreaIndexError(index, len(areas))


def append_area(areas: AreaList) -> tuple[AreaList, int]:
    """Append a blank area and return the new list with its index."""
    updated = areas + (new_area(),)
    return updated, len(updated) - 1


def set_field(areas: AreaList, index: int, field: AreaField, value: str) -> AreaList:
    """Return a copy of ``areas`` with one field of one entry replaced."""
    check_index(areas, index)
    field = AreaField.parse(field)

    entry = areas[index]
    if not isinstance(entry, dict):
        raise TypeError(
            f"Area {index} is not a mapping and cannot be edited: {entry!r}"
        )

    replaced = dict(entry)
    replaced[field.value] = value
    return areas[:index] + (replaced,) + areas[index + 1 :]


def handle_event(areas: AreaList, event: Event) -> tuple[AreaList, list[Command]]:
    """Apply one event to the area list."""
    if isinstance(event, AreasLoaded):
        return merge_persisted(event.persisted, event.defaults), []

    if isinstance(event, AreaAdded):
        updated, _ = append_area(areas)
        return updated, [PersistAreas(updated)]

    if isinstance(event, FieldChanged):
        updated = set_field(areas, event.index, event.field, event.value)
        return updated, [PersistAreas(updated)]

    raise ValueError(f"Unknown area event: {event!r}")
