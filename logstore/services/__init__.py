"""Service layer for business logic."""

from logstore.services.activity_service import ActivityService
from logstore.services.config_service import LogstoreConfig
from logstore.services.localizer import Localizer
from logstore.services.plugin_config_service import PluginConfig, PluginConfigService
from logstore.services.settings_service import SettingHistory, SettingsService

__all__ = [
    "ActivityService",
    "LogstoreConfig",
    "Localizer",
    "PluginConfig",
    "PluginConfigService",
    "SettingHistory",
    "SettingsService",
]
