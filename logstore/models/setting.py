"""Setting history model - append-only per-entity overrides."""

from sqlalchemy import BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from logstore.db.base import Base


class SettingRecord(Base):
    """A setting override that became effective at ``created_at``.

    Rows are never updated or deleted: the effective setting of an entity at a
    given time is the row with the greatest ``created_at`` not after that time.
    """

    __tablename__ = "logstore_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entity_type: Mapped[str] = mapped_column(String(64))  # e.g. "course"
    entity_id: Mapped[int] = mapped_column(Integer)
    target: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[int] = mapped_column(BigInteger)  # Unix timestamp in seconds

    __table_args__ = (
        Index("ix_logstore_settings_entity_created", "entity_type", "entity_id", "created_at"),
    )
