"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logstore.services.events import GROUPS


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App Info
    app_name: str = "LRS Logstore API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8400
    workers: int = 1

    # Database
    data_save_folder: str = "./data"
    db_file: str = "logstore.db"

    @property
    def database_url(self) -> str:
        """SQLite database URL."""
        db_path = Path(self.data_save_folder) / self.db_file
        return f"sqlite+aiosqlite:///{db_path}"

    # Plugin
    plugin_name: str = Field(default="logstore_trax", alias="PLUGIN_NAME")
    default_lang: str = Field(default="en", alias="DEFAULT_LANG")
    platform_iri: str = Field(
        default="http://localhost/moodle",
        alias="PLATFORM_IRI",
        description="Base IRI used to build activity identifiers",
    )

    # Plugin defaults written at install time (YAML)
    defaults_path: str | None = Field(default=None, alias="LOGSTORE_DEFAULTS")

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    @field_validator("platform_iri", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove trailing slashes so IRIs can be joined with '/'."""
        return v.rstrip("/")


# Values written to the plugin config store when the plugin is installed
BUILTIN_PLUGIN_DEFAULTS: dict[str, str] = {
    "lrs_endpoint": "",
    "lrs_username": "",
    "lrs_password": "",
    "lrs2_endpoint": "",
    "lrs2_username": "",
    "lrs2_password": "",
    "courses_default_target": "1",
    "sync_mode": "0",
    "actors_identification": "1",
    # Every event category is selected until an administrator deselects it
    **{group.setting: ",".join(group.default_selection()) for group in GROUPS.values()},
}


class PluginDefaults:
    """Plugin install defaults, optionally overridden from a YAML file."""

    def __init__(self, config_path: str | None = None):
        self._config: dict[str, str] = dict(BUILTIN_PLUGIN_DEFAULTS)
        if config_path:
            self.load(config_path)

    def load(self, config_path: str) -> None:
        """Load overrides from YAML file."""
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
            for key, value in data.items():
                self._config[key] = self._to_str(value)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get default value by key."""
        return self._config.get(key, default)

    def items(self) -> list[tuple[str, str]]:
        """Get all default values."""
        return list(self._config.items())

    @staticmethod
    def _to_str(value: Any) -> str:
        """Persisted values are strings; lists become comma-separated."""
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ",".join(str(v) for v in value)
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_plugin_defaults() -> PluginDefaults:
    """Get cached plugin defaults instance."""
    settings = get_settings()
    return PluginDefaults(settings.defaults_path)
