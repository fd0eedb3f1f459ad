from area_mcp.areas.config import AreaField
from area_mcp.areas.settings_view import (
    area_label,
    build_settings_page,
    render_text,
)

"""
test_settings_view.py
---------------------
Tests for the settings page display model.
"""


def test_blank_page():
    page = build_settings_page([])
    assert page.is_blank
    assert page.title == "Multi Vault Config"
    assert page.action == "Add Vault"
    assert "No areas configured" in render_text(page)


def test_area_labels_start_at_one():
    assert area_label(0) == "Vault 1"
    assert area_label(4) == "Vault 5"


def test_section_rows():
    page = build_settings_page(
        [{"areaPath": "Projects", "imagePath": "Images", "notePath": "Inbox"}]
    )
    section = page.sections[0]

    assert section.heading == "Vault 1"
    assert [row.field for row in section.rows] == [
        AreaField.AREA_PATH,
        AreaField.NOTE_PATH,
        AreaField.IMAGE_PATH,
    ]
    assert [row.value for row in section.rows] == ["Projects", "Inbox", "Images"]
    assert section.rows[0].name == "Vault 1 path"


def test_malformed_entry_shows_empty_rows():
    page = build_settings_page(["junk"])
    assert [row.value for row in page.sections[0].rows] == ["", "", ""]


def test_render_text_lists_fields():
    text = render_text(
        build_settings_page(
            [
                {"areaPath": "Projects", "imagePath": "", "notePath": "Inbox"},
                {"areaPath": "", "imagePath": "", "notePath": ""},
            ]
        )
    )
    assert "Vault 1 (index 0)" in text
    assert "Vault 2 (index 1)" in text
    assert "[areaPath]: Projects" in text
    assert "[imagePath]: <empty>" in text
