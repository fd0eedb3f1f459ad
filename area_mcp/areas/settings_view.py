"""
Display model of the area settings page.

Builds plain data describing what the settings tab shows: a blank page with
an "Add Vault" action while no areas exist, otherwise one section per area
with its three path rows. Rendering it is left to the host.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import AreaEntry, AreaField

PAGE_TITLE = "Multi Vault Config"
ADD_AREA_LABEL = "Add Vault"


@dataclass(frozen=True)
class PathRow:
    """One text input bound to a field of an area."""

    index: int
    field: AreaField
    name: str
    placeholder: str
    value: str


@dataclass(frozen=True)
class AreaSection:
    index: int
    heading: str
    rows: tuple[PathRow, ...]


@dataclass(frozen=True)
class SettingsPage:
    title: str
    action: str
    sections: tuple[AreaSection, ...] = field(default_factory=tuple)

    @property
    def is_blank(self) -> bool:
        return not self.sections


def area_label(index: int) -> str:
    """Heading shown for an area; numbering starts at 1."""
    return f"Vault {index + 1}"


def _row_specs(index: int) -> list[tuple[AreaField, str, str]]:
    label = area_label(index)
    return [
        (AreaField.AREA_PATH, f"{label} path", "Enter vault path"),
        (AreaField.NOTE_PATH, "New note location", "Enter the folder for new notes"),
        (AreaField.IMAGE_PATH, "Image location", "Enter the folder for images"),
    ]


def _field_value(entry: AreaEntry, area_field: AreaField) -> str:
    if isinstance(entry, dict):
        value = entry.get(area_field.value, "")
        return value if isinstance(value, str) else str(value)
    return ""


def build_section(index: int, entry: AreaEntry) -> AreaSection:
    rows = tuple(
        PathRow(
            index=index,
            field=area_field,
            name=name,
            placeholder=placeholder,
            value=_field_value(entry, area_field),
        )
        for area_field, name, placeholder in _row_specs(index)
    )
    return AreaSection(index=index, heading=area_label(index), rows=rows)


def build_settings_page(areas: Sequence[AreaEntry]) -> SettingsPage:
    sections = tuple(build_section(i, entry) for i, entry in enumerate(areas))
    return SettingsPage(title=PAGE_TITLE, action=ADD_AREA_LABEL, sections=sections)


def render_text(page: SettingsPage) -> str:
    """Plain-text rendering used by the MCP tools."""
    lines = [page.title]
    if page.is_blank:
        lines.append(f"No areas configured. Use '{page.action}' to create one.")
        return "\n".join(lines)

    for section in page.sections:
        lines.append("")
        lines.append(f"{section.heading} (index {section.index})")
        for row in section.rows:
            shown = row.value if row.value else "<empty>"
            lines.append(f"  • {row.name} [{row.field.value}]: {shown}")
    return "\n".join(lines)
