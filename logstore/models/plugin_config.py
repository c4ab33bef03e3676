"""Plugin configuration key-value model."""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from logstore.db.base import Base


class PluginConfigEntry(Base):
    """One configuration value of a plugin."""

    __tablename__ = "config_plugins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    plugin: Mapped[str] = mapped_column(String(100), index=True)
    name: Mapped[str] = mapped_column(String(100))
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (UniqueConstraint("plugin", "name", name="uq_config_plugins_plugin_name"),)
