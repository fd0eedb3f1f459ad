import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from area_mcp.areas import (
    AREA_FIELDS,
    FolderSuggestionEngine,
    VaultFolderIndex,
    area_label,
    create_area_registry,
    create_settings_storage,
    load_config_from_env,
)
from area_mcp.mcp.tool_handlers import AreaToolHandlers
from area_mcp.utils.logging_setup import set_logger

SERVER_NAME = "area-mcp"
SERVER_VERSION = "0.1.0"
AREA_URI_PREFIX = "area://config/"


def create_server(handlers: AreaToolHandlers) -> Server:
    """Build an MCP server whose tools and resources go through ``handlers``."""
    server: Server = Server(SERVER_NAME)

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        """
        List configured areas.
        Each area is exposed as a resource with a custom area:// URI scheme.
        """
        return [
            types.Resource(
                uri=AnyUrl(f"{AREA_URI_PREFIX}{index}"),
                name=area_label(index),
                description=f"Folder bindings for {area_label(index)}",
                mimeType="application/json",
            )
            for index in range(len(handlers.registry))
        ]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> str:
        """
        Read one area's bindings by its URI.
        The area index is the last path segment.
        """
        if uri.scheme != "area":
            raise ValueError(f"Unsupported URI scheme: {uri.scheme}")

        segment = (uri.path or "").rstrip("/").rsplit("/", 1)[-1]
        if not segment.isdigit():
            raise ValueError(f"Area not found: {uri}")
        return handlers.read_area(int(segment))

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """
        List available tools.
        Each tool specifies its arguments using JSON Schema validation.
        """
        return [
            types.Tool(
                name="list-areas",
                description="Show every configured area with its vault, note and image folders",
                inputSchema={
                    "type": "object",
                    "properties": {},
                    "required": [],
                },
            ),
            types.Tool(
                name="add-area",
                description="Add a new area with empty vault, note and image folders",
                inputSchema={
                    "type": "object",
                    "properties": {},
                    "required": [],
                },
            ),
            types.Tool(
                name="update-area-field",
                description="Set one folder of an existing area and save the configuration",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "index": {
                            "type": "integer",
                            "description": "Position of the area (0 is 'Vault 1')",
                            "minimum": 0,
                        },
                        "field": {
                            "type": "string",
                            "description": "Which folder to set",
                            "enum": AREA_FIELDS,
                        },
                        "value": {
                            "type": "string",
                            "description": "Vault-relative folder path; may be empty",
                        },
                    },
                    "required": ["index", "field", "value"],
                },
            ),
            types.Tool(
                name="suggest-folders",
                description="List vault folders whose path contains the query (case-insensitive)",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Partial folder path; empty lists every folder",
                            "default": "",
                        },
                    },
                    "required": [],
                },
            ),
        ]

    @server.call_tool()
    async def handle_call_tool(
        name: str, arguments: dict | None
    ) -> list[types.TextContent]:
        """
        Handle tool execution requests.
        Tools can modify server state and notify clients of changes.
        """
        try:
            if name == "list-areas":
                return await handlers.handle_list_areas(arguments)
            elif name == "add-area":
                return await handlers.handle_add_area(arguments)
            elif name == "update-area-field":
                return await handlers.handle_update_area_field(arguments)
            elif name == "suggest-folders":
                return await handlers.handle_suggest_folders(arguments)
            else:
                raise ValueError(f"Unknown tool: {name}")

        except Exception as e:
            handlers.logger.error(f"Tool {name} failed: {e}")
            return [
                types.TextContent(
                    type="text",
                    text=f"Error executing {name}: {str(e)}",
                )
            ]

    return server


async def main() -> None:
    """Main server function with proper resource cleanup."""
    config = load_config_from_env()
    logger = set_logger(config.log_level)
    logger.info(f"Starting {SERVER_NAME} with config: {config.to_dict()}")

    storage = create_settings_storage(config)
    logger.info(f"Settings storage: {storage.get_stats()}")
    registry = await create_area_registry(storage, logger)
    engine = FolderSuggestionEngine(
        VaultFolderIndex(config.vault_root, config.include_hidden_folders)
    )
    server = create_server(AreaToolHandlers(registry, engine, logger))

    try:
        # Run the server using stdin/stdout streams
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=SERVER_NAME,
                    server_version=SERVER_VERSION,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )
    finally:
        # Let the last settings write land before exiting
        await registry.shutdown()
