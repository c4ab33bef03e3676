"""Plugin configuration API endpoints."""

from fastapi import APIRouter

from logstore.core.config import get_settings
from logstore.core.deps import Config, DBSession
from logstore.schemas.config import (
    CategoryGroupDTO,
    ConfigSummary,
    ConfigValueDTO,
    ConfigValueUpdate,
    SelectedEventsDTO,
)
from logstore.services.events import OTHER, get_group
from logstore.services.plugin_config_service import PluginConfigService

router = APIRouter()


@router.get("", response_model=ConfigSummary)
async def get_config(config: Config) -> ConfigSummary:
    """Get the plugin configuration summary."""
    return ConfigSummary(
        plugin=config.config.plugin,
        default_target=config.default_target(),
        sync=config.sync(),
        anonymous=config.anonymous(),
        mbox=config.mbox(),
        targets=config.targets(),
        sync_modes=config.sync_modes(),
        actors_identification_modes=config.actors_identification_modes(),
    )


@router.get("/targets", response_model=dict[int, str])
async def get_targets(config: Config, remove_empty_lrs: bool = False) -> dict[int, str]:
    """
    Get the LRS target options.

    - **remove_empty_lrs**: Hide the LRS which have no endpoint
    """
    return config.targets(remove_empty_lrs)


@router.get("/events", response_model=SelectedEventsDTO)
async def get_events(config: Config) -> SelectedEventsDTO:
    """Get the selected and known events."""
    return SelectedEventsDTO(
        selected=config.selected_events(),
        known=config.known_events(),
        other_events=config.other_events(),
    )


@router.get("/events/{group}", response_model=CategoryGroupDTO)
async def get_event_group(group: str, config: Config) -> CategoryGroupDTO:
    """
    Get an event category group.

    - **group**: core, moodle_components, additional_components or scheduled_statements
    """
    category_group = get_group(group)
    persisted = config.persisted_selection(category_group)
    return CategoryGroupDTO(
        group=category_group.key,
        setting=category_group.setting,
        catalog=category_group.catalog(),
        defaults=category_group.default_selection(),
        selected=category_group.selected(persisted),
        other_selected=(
            category_group.other_selected(persisted)
            if OTHER in category_group.extra_labels
            else None
        ),
    )


@router.put("/{name}", response_model=ConfigValueDTO)
async def set_config_value(
    name: str,
    data: ConfigValueUpdate,
    db: DBSession,
) -> ConfigValueDTO:
    """
    Set a plugin configuration value.

    - **name**: Setting name
    - **value**: New value
    """
    plugin = get_settings().plugin_name
    entry = await PluginConfigService(db).set(plugin, name, data.value)
    return ConfigValueDTO(plugin=entry.plugin, name=entry.name, value=entry.value)
