"""
Model registry for table creation.

Import all models here to ensure they are registered with SQLAlchemy metadata.
"""

from logstore.db.base import Base
from logstore.models.course import Course
from logstore.models.module import Module
from logstore.models.plugin_config import PluginConfigEntry
from logstore.models.setting import SettingRecord

__all__ = [
    "Base",
    "Course",
    "Module",
    "PluginConfigEntry",
    "SettingRecord",
]
