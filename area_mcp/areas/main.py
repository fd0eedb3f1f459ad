import asyncio
from pathlib import Path

from area_mcp.areas import (
    AreaField,
    AreaServerConfig,
    FolderSuggest,
    FolderSuggestionEngine,
    TextInput,
    VaultFolderIndex,
    build_settings_page,
    create_area_registry,
    create_settings_storage,
    render_text,
)
from area_mcp.utils.logging_setup import set_logger

"""Sample script to run the area registry and folder suggestions locally without MCP."""

SAMPLE_VAULT_DIR = Path("tests/data/vault_example")
STORAGE = "memory"  # you can try "json" to write into the sample vault.


async def run_areas() -> None:
    config = AreaServerConfig(vault_root=SAMPLE_VAULT_DIR, storage_type=STORAGE)

    logger = set_logger(config.log_level)
    registry = await create_area_registry(create_settings_storage(config), logger)
    engine = FolderSuggestionEngine(VaultFolderIndex(config.vault_root))

    try:
        if len(registry) == 0:
            logger.info("No areas yet, adding one...")
        index = await registry.add_area()

        # Wire one path field the way the settings tab does
        area_input = TextInput(placeholder="Enter vault path")
        popup = FolderSuggest(engine, area_input)
        pending: list[asyncio.Task] = []
        area_input.on_change(
            lambda value: pending.append(
                asyncio.create_task(
                    registry.update_field(index, AreaField.AREA_PATH, value)
                )
            )
        )

        area_input.value = "proj"
        suggestions = popup.on_input()
        logger.info(f"\nSuggestions for '{area_input.value}':\n" + "\n".join(popup.rendered()))

        if suggestions:
            popup.select(suggestions[0])
        await asyncio.gather(*pending)

        logger.info("\n" + render_text(build_settings_page(registry.areas)))

    finally:
        await registry.shutdown()


if __name__ == "__main__":
    asyncio.run(run_areas())
