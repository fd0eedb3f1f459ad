import json
from logging import Logger

import mcp.types as types

from area_mcp.areas import (
    AreaField,
    AreaRegistry,
    FolderSuggestionEngine,
    area_label,
    build_settings_page,
    render_text,
)
from area_mcp.utils.logging_setup import set_logger

"""
MCP tool handlers for area operations.

This module contains the business logic for all MCP tools,
keeping the server.py focused on protocol handling.
"""


def _text(text: str) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=text)]


class AreaToolHandlers:
    """Tool handlers bound to one registry and one suggestion engine."""

    def __init__(
        self,
        registry: AreaRegistry,
        engine: FolderSuggestionEngine,
        logger: Logger | None = None,
    ):
        self.registry = registry
        self.engine = engine
        self.logger = logger or set_logger()

    async def handle_list_areas(self, arguments: dict | None) -> list[types.TextContent]:
        """Handle the list-areas tool."""
        page = build_settings_page(self.registry.areas)
        return _text(render_text(page))

    async def handle_add_area(self, arguments: dict | None) -> list[types.TextContent]:
        """Handle the add-area tool."""
        index = await self.registry.add_area()
        return _text(f"Added {area_label(index)} at index {index}")

    async def handle_update_area_field(
        self, arguments: dict | None
    ) -> list[types.TextContent]:
        """Handle the update-area-field tool."""
        if not arguments:
            raise ValueError("Missing arguments")

        index = arguments.get("index")
        if index is None:
            raise ValueError("Missing index")
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Index must be an integer, got {index!r}")
        field_name = arguments.get("field")
        if not field_name:
            raise ValueError("Missing field")
        value = arguments.get("value")
        if value is None:
            raise ValueError("Missing value")

        area_field = AreaField.parse(field_name)
        await self.registry.update_field(index, area_field, str(value))

        shown = value if value else "<empty>"
        return _text(f"Set {area_label(index)} {area_field.value} to {shown}")

    async def handle_suggest_folders(
        self, arguments: dict | None
    ) -> list[types.TextContent]:
        """Handle the suggest-folders tool."""
        query = (arguments or {}).get("query", "") or ""
        suggestions = self.engine.suggest(query)

        if not suggestions:
            return _text(f"No folders match '{query}'")

        lines = [self.engine.render(path) for path in suggestions]
        return _text("\n".join(lines))

    def read_area(self, index: int) -> str:
        """JSON for the area resource at ``index``."""
        return json.dumps(self.registry.get(index), ensure_ascii=False, indent=2)
