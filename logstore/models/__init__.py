"""Database models."""

from logstore.models.course import Course
from logstore.models.module import Module
from logstore.models.plugin_config import PluginConfigEntry
from logstore.models.setting import SettingRecord

__all__ = [
    "Course",
    "Module",
    "PluginConfigEntry",
    "SettingRecord",
]
