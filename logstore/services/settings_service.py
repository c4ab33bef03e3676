"""Settings service for the append-only, time-versioned setting history."""

import time
from bisect import bisect_right
from typing import Callable, Iterable

from loguru import logger
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from logstore.models.setting import SettingRecord
from logstore.services.base_service import BaseService

Clock = Callable[[], int]


def now() -> int:
    """Current Unix timestamp in seconds."""
    return int(time.time())


class SettingHistory:
    """Ordered setting log of one entity, resolved with binary search.

    Records are sorted by ``(created_at, id)`` so that two records created in
    the same second resolve to the one inserted last.
    """

    def __init__(self, records: Iterable[SettingRecord]):
        self.records = sorted(records, key=lambda r: (r.created_at, r.id))
        self._times = [r.created_at for r in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    def current(self) -> SettingRecord | None:
        """Most recent record, or None when the entity has no override."""
        return self.records[-1] if self.records else None

    def at(self, timestamp: int) -> SettingRecord | None:
        """Record effective at ``timestamp``: never one created after it."""
        index = bisect_right(self._times, timestamp)
        return self.records[index - 1] if index else None


class SettingsService(BaseService[SettingRecord]):
    """Setting history operations, scoped by (entity type, entity id)."""

    def __init__(self, db: AsyncSession, clock: Clock = now):
        super().__init__(db, SettingRecord)
        self.clock = clock

    def _entity_query(self, entity_type: str, entity_id: int):
        return select(SettingRecord).where(
            SettingRecord.entity_type == entity_type,
            SettingRecord.entity_id == entity_id,
        )

    async def get_last_setting(
        self, entity_type: str, entity_id: int
    ) -> SettingRecord | None:
        """Get the current setting of an entity."""
        query = (
            self._entity_query(entity_type, entity_id)
            .order_by(desc(SettingRecord.created_at), desc(SettingRecord.id))
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_setting_at(
        self, entity_type: str, entity_id: int, timestamp: int
    ) -> SettingRecord | None:
        """Get the setting of an entity effective at a given time."""
        query = (
            self._entity_query(entity_type, entity_id)
            .where(SettingRecord.created_at <= timestamp)
            .order_by(desc(SettingRecord.created_at), desc(SettingRecord.id))
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_history(self, entity_type: str, entity_id: int) -> SettingHistory:
        """Get the full setting history of an entity."""
        result = await self.db.execute(self._entity_query(entity_type, entity_id))
        return SettingHistory(result.scalars().all())

    async def add_setting(
        self, entity_type: str, entity_id: int, target: int
    ) -> SettingRecord:
        """Append a new setting, effective from now on."""
        record = SettingRecord(
            entity_type=entity_type,
            entity_id=entity_id,
            target=int(target),
            created_at=self.clock(),
        )
        record = await self.create(record)
        logger.info(
            f"Setting recorded for {entity_type} {entity_id}: "
            f"target={record.target} at {record.created_at}"
        )
        return record
