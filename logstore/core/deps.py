"""FastAPI dependencies for dependency injection."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from logstore.core.config import get_settings
from logstore.db.session import async_session_maker
from logstore.services.config_service import LogstoreConfig
from logstore.services.plugin_config_service import PluginConfigService
from logstore.services.settings_service import SettingsService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_logstore_config(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LogstoreConfig:
    """Build the configuration façade from a fresh snapshot of the plugin config."""
    settings = get_settings()
    plugin_config = await PluginConfigService(db).load(settings.plugin_name)
    return LogstoreConfig(plugin_config, SettingsService(db))


# Type aliases for cleaner dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
Config = Annotated[LogstoreConfig, Depends(get_logstore_config)]
