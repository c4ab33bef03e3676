"""Logstore configuration façade.

Reads the plugin configuration, enumerates loggable event categories and
resolves the LRS target of each course from the setting history.
"""

from typing import Iterable

from loguru import logger

from logstore.core.enums import ActorsIdentification, SyncMode, Target
from logstore.core.exceptions import InvalidTargetError
from logstore.models.setting import SettingRecord
from logstore.services.events import ADDITIONAL, CORE, GROUPS, MOODLE, SCHEDULED, CategoryGroup
from logstore.services.plugin_config_service import PluginConfig
from logstore.services.settings_service import SettingsService

COURSE = "course"

TARGET_LABELS = {
    Target.NO_LRS: "No LRS",
    Target.MAIN: "Main LRS",
    Target.SECONDARY: "Secondary LRS",
}

SYNC_MODE_LABELS = {
    SyncMode.SYNC: "Synchronous",
    SyncMode.ASYNC: "Asynchronous",
}

ACTORS_IDENTIFICATION_LABELS = {
    ActorsIdentification.ANONYMOUS: "Anonymous",
    ActorsIdentification.ACCOUNT_USERNAME: "Account with username",
    ActorsIdentification.MBOX: "Email address (mbox)",
}


def to_target(value: int | str) -> Target:
    """Convert a raw value to a target, rejecting unknown values."""
    try:
        return Target(int(value))
    except (TypeError, ValueError):
        raise InvalidTargetError(value) from None


class LogstoreConfig:
    """Configuration of the logstore plugin."""

    def __init__(self, config: PluginConfig, settings: SettingsService | None = None):
        self.config = config
        self.settings = settings

    # Targets

    def targets(self, remove_empty_lrs: bool = False) -> dict[int, str]:
        """Target options, optionally without the LRS that have no endpoint."""
        targets = {int(Target.NO_LRS): TARGET_LABELS[Target.NO_LRS]}
        if not remove_empty_lrs or self.config.get("lrs_endpoint"):
            targets[int(Target.MAIN)] = TARGET_LABELS[Target.MAIN]
        if not remove_empty_lrs or self.config.get("lrs2_endpoint"):
            targets[int(Target.SECONDARY)] = TARGET_LABELS[Target.SECONDARY]
        return targets

    def default_target(self) -> int:
        """Target of the courses which have no override."""
        value = self.config.get_int("courses_default_target", int(Target.NO_LRS))
        try:
            return int(to_target(value))
        except InvalidTargetError:
            logger.warning(f"Invalid default target {value!r}, using no LRS")
            return int(Target.NO_LRS)

    def resolve_target(self, setting: SettingRecord | None) -> int:
        """Target of a resolved override, or the default when there is none."""
        return self.default_target() if setting is None else setting.target

    async def course_setting(
        self, course_id: int, timestamp: int | None = None
    ) -> SettingRecord | None:
        """Override of a course effective now, or at ``timestamp``."""
        if timestamp is None:
            setting = await self._settings.get_last_setting(COURSE, course_id)
        else:
            setting = await self._settings.get_setting_at(COURSE, course_id, timestamp)
        if setting is None:
            logger.debug(f"No target override for course {course_id}, using default")
        return setting

    async def course_target(self, course_id: int) -> int:
        """Current target of a course."""
        return self.resolve_target(await self.course_setting(course_id))

    async def course_target_at(self, course_id: int, timestamp: int) -> int:
        """Target of a course at a given time."""
        return self.resolve_target(await self.course_setting(course_id, timestamp))

    async def course_targets_at(
        self, course_id: int, timestamps: Iterable[int]
    ) -> dict[int, int]:
        """Targets of a course at many times, from a single history read."""
        history = await self._settings.get_history(COURSE, course_id)
        return {timestamp: self.resolve_target(history.at(timestamp)) for timestamp in timestamps}

    async def set_course_target(self, course_id: int, target: int | str) -> None:
        """Record a new target for a course."""
        await self._settings.add_setting(COURSE, course_id, to_target(target))

    @property
    def _settings(self) -> SettingsService:
        if self.settings is None:
            raise RuntimeError("Course targets require a settings service")
        return self.settings

    # Delivery and identification

    def sync_modes(self) -> dict[int, str]:
        """Sync mode options."""
        return {int(k): v for k, v in SYNC_MODE_LABELS.items()}

    def sync(self) -> bool:
        """Are statements sent synchronously?"""
        return self.config.get_int("sync_mode", int(SyncMode.SYNC)) == SyncMode.SYNC

    def actors_identification_modes(self) -> dict[int, str]:
        """Actors identification options."""
        return {int(k): v for k, v in ACTORS_IDENTIFICATION_LABELS.items()}

    def anonymous(self) -> bool:
        """Are actors anonymized?"""
        return self._identification() == ActorsIdentification.ANONYMOUS

    def mbox(self) -> bool:
        """Are actors identified by email?"""
        return self._identification() == ActorsIdentification.MBOX

    def _identification(self) -> int:
        return self.config.get_int(
            "actors_identification", int(ActorsIdentification.ACCOUNT_USERNAME)
        )

    # Event categories

    def persisted_selection(self, group: CategoryGroup) -> str | None:
        """Persisted selection string of a category group."""
        return self.config.get(group.setting)

    def loggable_core_events(self) -> dict[str, str]:
        return CORE.catalog()

    def default_core_events(self) -> dict[str, bool]:
        return CORE.default_selection()

    def selected_core_events(self) -> dict[str, str]:
        return CORE.selected_events(self.persisted_selection(CORE))

    def loggable_moodle_components(self) -> dict[str, str]:
        return MOODLE.catalog()

    def default_moodle_components(self) -> dict[str, bool]:
        return MOODLE.default_selection()

    def selected_moodle_events(self) -> dict[str, str]:
        return MOODLE.selected_events(self.persisted_selection(MOODLE))

    def loggable_additional_components(self) -> dict[str, str]:
        return ADDITIONAL.catalog()

    def default_additional_components(self) -> dict[str, bool]:
        return ADDITIONAL.default_selection()

    def selected_additional_events(self) -> dict[str, str]:
        return ADDITIONAL.selected_events(self.persisted_selection(ADDITIONAL))

    def other_components_selected(self) -> bool:
        """Is the "other components" option selected?"""
        return ADDITIONAL.other_selected(self.persisted_selection(ADDITIONAL))

    def loggable_scheduled_statements(self) -> dict[str, str]:
        return SCHEDULED.catalog()

    def default_scheduled_statements(self) -> dict[str, bool]:
        return SCHEDULED.default_selection()

    def selected_scheduled_events(self) -> dict[str, str]:
        return SCHEDULED.selected_events(self.persisted_selection(SCHEDULED))

    def is_scheduled(self, statement_name: str) -> bool:
        """Is a scheduled statement selected?"""
        return statement_name in SCHEDULED.selected(self.persisted_selection(SCHEDULED))

    def selected_events(self) -> dict[str, str]:
        """Selected events of every category group."""
        events: dict[str, str] = {}
        for group in GROUPS.values():
            events.update(group.selected_events(self.persisted_selection(group)))
        return events

    def known_events(self) -> dict[str, str]:
        """Events of every category group."""
        events: dict[str, str] = {}
        for group in GROUPS.values():
            events.update(group.known_events())
        return events

    def other_events(self) -> bool:
        """Should events of components that are not enumerated be logged?"""
        return self.other_components_selected()
