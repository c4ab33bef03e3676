"""Tests for the setting history and course target resolution."""

import pytest

from logstore.models.setting import SettingRecord
from logstore.services.config_service import LogstoreConfig
from logstore.services.plugin_config_service import PluginConfig
from logstore.services.settings_service import SettingHistory, SettingsService


def make_config(db_session, clock, default_target: str = "1") -> LogstoreConfig:
    plugin_config = PluginConfig("logstore_trax", {"courses_default_target": default_target})
    return LogstoreConfig(plugin_config, SettingsService(db_session, clock=clock))


@pytest.mark.asyncio
async def test_no_setting_returns_none(db_session, clock):
    """Test an entity without overrides has no setting."""
    service = SettingsService(db_session, clock=clock)

    assert await service.get_last_setting("course", 1) is None
    assert await service.get_setting_at("course", 1, clock()) is None


@pytest.mark.asyncio
async def test_targets_fall_back_to_default(db_session, clock):
    """Test courses without overrides use the global default target."""
    config = make_config(db_session, clock, default_target="2")

    assert await config.course_target(42) == 2
    assert await config.course_target_at(42, clock()) == 2
    assert await config.course_target_at(42, 0) == 2


@pytest.mark.asyncio
async def test_setting_at_each_recorded_time(db_session, clock):
    """Test each override is effective from its creation time."""
    service = SettingsService(db_session, clock=clock)

    times = []
    for target in (1, 0, 2, 1):
        times.append(clock.advance(60))
        await service.add_setting("course", 1, target)

    for time, target in zip(times, (1, 0, 2, 1)):
        setting = await service.get_setting_at("course", 1, time)
        assert setting is not None
        assert setting.target == target
        assert setting.created_at == time

    # Between two overrides, the earlier one applies
    setting = await service.get_setting_at("course", 1, times[1] + 30)
    assert setting.target == 0

    # Before the first override, nothing applies
    assert await service.get_setting_at("course", 1, times[0] - 1) is None


@pytest.mark.asyncio
async def test_setting_at_ignores_future_records(db_session, clock):
    """Test a later override is never picked for an earlier time."""
    service = SettingsService(db_session, clock=clock)
    first = clock.advance(10)
    await service.add_setting("course", 1, 2)
    clock.advance(3600)
    await service.add_setting("course", 1, 0)

    setting = await service.get_setting_at("course", 1, first + 100)
    assert setting.target == 2


@pytest.mark.asyncio
async def test_setting_at_is_monotonic(db_session, clock):
    """Test resolved creation times never decrease as the query time grows."""
    service = SettingsService(db_session, clock=clock)
    for target in (1, 2, 0, 2):
        clock.advance(100)
        await service.add_setting("course", 3, target)

    previous = -1
    for time in range(clock() - 500, clock() + 50, 25):
        setting = await service.get_setting_at("course", 3, time)
        resolved = setting.created_at if setting else -1
        assert resolved >= previous
        previous = resolved


@pytest.mark.asyncio
async def test_last_setting_equals_setting_now(db_session, clock):
    """Test the current setting is the setting at the present time."""
    service = SettingsService(db_session, clock=clock)
    for target in (2, 1):
        clock.advance(5)
        await service.add_setting("course", 1, target)

    clock.advance(1)
    current = await service.get_last_setting("course", 1)
    at_now = await service.get_setting_at("course", 1, clock())
    assert current.id == at_now.id
    assert current.target == 1


@pytest.mark.asyncio
async def test_add_setting_is_append_only(db_session, clock):
    """Test recording a setting keeps the previous ones."""
    service = SettingsService(db_session, clock=clock)
    await service.add_setting("course", 1, 1)
    await service.add_setting("course", 1, 2)

    records = await service.get_all()
    assert [r.target for r in records] == [1, 2]


@pytest.mark.asyncio
async def test_same_second_settings_resolve_to_last_inserted(db_session, clock):
    """Test two overrides recorded in the same second resolve to the last one."""
    service = SettingsService(db_session, clock=clock)
    await service.add_setting("course", 1, 1)
    await service.add_setting("course", 1, 2)

    assert (await service.get_last_setting("course", 1)).target == 2
    assert (await service.get_setting_at("course", 1, clock())).target == 2
    history = await service.get_history("course", 1)
    assert history.at(clock()).target == 2


@pytest.mark.asyncio
async def test_settings_are_scoped_by_entity(db_session, clock):
    """Test overrides of other entities are ignored."""
    service = SettingsService(db_session, clock=clock)
    await service.add_setting("course", 1, 2)
    await service.add_setting("category", 2, 1)

    assert await service.get_last_setting("course", 2) is None
    assert await service.get_last_setting("category", 1) is None
    assert (await service.get_last_setting("course", 1)).target == 2


@pytest.mark.asyncio
async def test_course_targets_at_batch(db_session, clock):
    """Test resolving many event times from one history read."""
    config = make_config(db_session, clock, default_target="1")
    start = clock()
    clock.advance(100)
    await config.set_course_target(7, 2)
    clock.advance(100)
    await config.set_course_target(7, 0)

    targets = await config.course_targets_at(7, [start, start + 150, start + 250])
    assert targets == {start: 1, start + 150: 2, start + 250: 0}
    assert await config.course_target(7) == 0


def test_setting_history_binary_search():
    """Test in-memory history resolution."""
    records = [
        SettingRecord(id=3, entity_type="course", entity_id=1, target=0, created_at=300),
        SettingRecord(id=1, entity_type="course", entity_id=1, target=1, created_at=100),
        SettingRecord(id=2, entity_type="course", entity_id=1, target=2, created_at=200),
    ]
    history = SettingHistory(records)

    assert len(history) == 3
    assert history.at(99) is None
    assert history.at(100).target == 1
    assert history.at(250).target == 2
    assert history.at(10_000).target == 0
    assert history.current().id == 3
    assert SettingHistory([]).current() is None
