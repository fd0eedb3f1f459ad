import pytest

from area_mcp.areas.config import AreaField
from area_mcp.areas.errors import AreaIndexError
from area_mcp.areas.state import (
    AreaAdded,
    AreasLoaded,
    FieldChanged,
    PersistAreas,
    append_area,
    handle_event,
    merge_persisted,
    set_field,
)

"""
test_state.py
-------------
Tests for the pure area-list handlers: no storage, no registry.
"""

BLANK = {"areaPath": "", "imagePath": "", "notePath": ""}


@pytest.mark.parametrize("persisted", [None, {}, "areas", 3, {"areaPath": "x"}])
def test_non_sequence_loads_empty(persisted):
    assert merge_persisted(persisted) == ()


def test_persisted_then_defaults():
    default = {"areaPath": "Default", "imagePath": "", "notePath": ""}
    stored = [{"areaPath": "A", "imagePath": "B", "notePath": "C"}]
    assert merge_persisted(stored, [default]) == (stored[0], default)


def test_malformed_entries_pass_through():
    stored = ["not an area", {"areaPath": 1}, None]
    assert merge_persisted(stored) == tuple(stored)


def test_append_area_returns_new_index():
    areas, index = append_area(())
    assert index == 0
    assert areas == (BLANK,)

    areas, index = append_area(areas)
    assert index == 1
    assert len(areas) == 2


def test_set_field_leaves_everything_else():
    areas = (dict(BLANK), {"areaPath": "X", "imagePath": "Y", "notePath": "Z"})
    updated = set_field(areas, 1, AreaField.NOTE_PATH, "Inbox")

    assert updated[1] == {"areaPath": "X", "imagePath": "Y", "notePath": "Inbox"}
    assert updated[0] == BLANK
    # input untouched
    assert areas[1]["notePath"] == "Z"


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_set_field_out_of_range(index):
    with pytest.raises(AreaIndexError):
        set_field((dict(BLANK),), index, AreaField.AREA_PATH, "x")


def test_index_error_is_index_error():
    with pytest.raises(IndexError):
        set_field((), 0, AreaField.AREA_PATH, "x")


def test_set_field_rejects_non_int_index():
    with pytest.raises(TypeError):
        set_field((dict(BLANK),), "0", AreaField.AREA_PATH, "x")


def test_set_field_on_malformed_entry():
    with pytest.raises(TypeError):
        set_field(("junk",), 0, AreaField.AREA_PATH, "x")


def test_handle_loaded_has_no_commands():
    areas, commands = handle_event((), AreasLoaded([dict(BLANK)]))
    assert areas == (BLANK,)
    assert commands == []


def test_handle_added_persists_new_list():
    areas, commands = handle_event((), AreaAdded())
    assert areas == (BLANK,)
    assert commands == [PersistAreas(areas)]


def test_handle_field_changed_persists_new_list():
    areas, _ = handle_event((), AreaAdded())
    areas, commands = handle_event(
        areas, FieldChanged(0, AreaField.AREA_PATH, "Projects/2024")
    )
    assert areas[0]["areaPath"] == "Projects/2024"
    assert commands == [PersistAreas(areas)]


def test_handle_unknown_event():
    with pytest.raises(ValueError):
        handle_event((), object())
