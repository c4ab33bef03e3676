"""Plugin configuration service for the key-value config store."""

from typing import Iterable

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from logstore.models.plugin_config import PluginConfigEntry
from logstore.services.base_service import BaseService


class PluginConfig:
    """Read-only snapshot of a plugin's configuration values."""

    def __init__(self, plugin: str, values: dict[str, str | None] | None = None):
        self.plugin = plugin
        self._values = dict(values or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get configuration value by key."""
        value = self._values.get(key)
        return default if value is None else value

    def get_int(self, key: str, default: int = 0) -> int:
        """Get configuration value as an integer."""
        value = self.get(key)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid integer for {self.plugin}/{key}: {value!r}")
            return default

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def as_dict(self) -> dict[str, str | None]:
        """Get all configuration values."""
        return dict(self._values)


class PluginConfigService(BaseService[PluginConfigEntry]):
    """Key-value configuration store, keyed by plugin and setting name."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, PluginConfigEntry)

    async def _get_entry(self, plugin: str, name: str) -> PluginConfigEntry | None:
        result = await self.db.execute(
            select(PluginConfigEntry).where(
                PluginConfigEntry.plugin == plugin,
                PluginConfigEntry.name == name,
            )
        )
        return result.scalar_one_or_none()

    async def get(self, plugin: str, name: str) -> str | None:
        """Get a configuration value."""
        entry = await self._get_entry(plugin, name)
        return entry.value if entry else None

    async def set(self, plugin: str, name: str, value: str | None) -> PluginConfigEntry:
        """Create or update a configuration value."""
        entry = await self._get_entry(plugin, name)
        if entry:
            entry.value = value
            return await self.update(entry)
        return await self.create(PluginConfigEntry(plugin=plugin, name=name, value=value))

    async def load(self, plugin: str) -> PluginConfig:
        """Load every value of a plugin into a snapshot."""
        result = await self.db.execute(
            select(PluginConfigEntry).where(PluginConfigEntry.plugin == plugin)
        )
        return PluginConfig(plugin, {e.name: e.value for e in result.scalars().all()})

    async def install(
        self, plugin: str, defaults: Iterable[tuple[str, str]]
    ) -> list[str]:
        """Write default values that are not configured yet.

        Existing values are left untouched. Returns the names written.
        """
        existing = await self.load(plugin)
        written = []
        for name, value in defaults:
            if name in existing:
                continue
            self.db.add(PluginConfigEntry(plugin=plugin, name=name, value=value))
            written.append(name)

        if written:
            await self.db.commit()
            logger.info(f"Installed {len(written)} default settings for {plugin}")
        return written
