"""Plugin configuration schemas for API request/response."""

from pydantic import BaseModel, Field


class ConfigSummary(BaseModel):
    """Plugin configuration summary."""

    plugin: str
    default_target: int
    sync: bool
    anonymous: bool
    mbox: bool
    targets: dict[int, str]
    sync_modes: dict[int, str]
    actors_identification_modes: dict[int, str]


class ConfigValueUpdate(BaseModel):
    """Plugin configuration value update schema."""

    value: str


class ConfigValueDTO(BaseModel):
    """Plugin configuration value response schema."""

    plugin: str
    name: str
    value: str | None = None


class CategoryGroupDTO(BaseModel):
    """Event category group with its current selection."""

    group: str
    setting: str
    catalog: dict[str, str]
    defaults: dict[str, bool]
    selected: dict[str, bool]
    other_selected: bool | None = Field(
        None, description="Only set for the additional components group"
    )


class SelectedEventsDTO(BaseModel):
    """Selected and known events across every category group."""

    selected: dict[str, str]
    known: dict[str, str]
    other_events: bool
