"""Pydantic schemas for API request/response."""

from logstore.schemas.activity import ActivityDefinition, LanguageMap
from logstore.schemas.config import (
    CategoryGroupDTO,
    ConfigSummary,
    ConfigValueDTO,
    ConfigValueUpdate,
    SelectedEventsDTO,
)
from logstore.schemas.setting import CourseTargetDTO, CourseTargetUpdate, SettingDTO

__all__ = [
    "ActivityDefinition",
    "LanguageMap",
    "CategoryGroupDTO",
    "ConfigSummary",
    "ConfigValueDTO",
    "ConfigValueUpdate",
    "SelectedEventsDTO",
    "CourseTargetDTO",
    "CourseTargetUpdate",
    "SettingDTO",
]
