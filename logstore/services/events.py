"""Catalogs of loggable platform events, grouped by category.

Each category group maps a category key (an event family or a component) to
the events it covers, ``{event name: handler name}``. Administrators select
category keys; the persisted selection is a comma-separated key list.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from loguru import logger

from logstore.core.exceptions import UnknownCategoryGroupError

EventMap = Mapping[str, str]

# Synthetic key of the additional components group: "also log components
# that are not explicitly enumerated"
OTHER = "other"


def parse_selection(persisted: str | None) -> list[str]:
    """Split a persisted comma-separated selection into keys."""
    if not persisted:
        return []
    return [key.strip() for key in persisted.split(",") if key.strip()]


@dataclass(frozen=True)
class CategoryGroup:
    """A group of event categories and its persisted selection setting."""

    key: str
    setting: str
    events: Mapping[str, EventMap]
    labels: Mapping[str, str]
    extra_labels: Mapping[str, str] = field(default_factory=dict)

    def catalog(self) -> dict[str, str]:
        """Selectable category keys and their display labels."""
        catalog = {key: self.labels.get(key, key) for key in self.events}
        catalog.update(self.extra_labels)
        return catalog

    def default_selection(self) -> dict[str, bool]:
        """Every selectable key is on by default."""
        return {key: True for key in self.catalog()}

    def selected(self, persisted: str | None) -> dict[str, bool]:
        """Persisted keys that are known event categories.

        Unknown or stale keys are dropped, and so are synthetic keys which
        carry no events of their own.
        """
        keys = parse_selection(persisted)
        unknown = [k for k in keys if k not in self.events and k not in self.extra_labels]
        if unknown:
            logger.warning(f"Ignoring unknown {self.key} selection keys: {unknown}")
        return {key: True for key in self.events if key in keys}

    def selected_events(self, persisted: str | None) -> dict[str, str]:
        """Events of the selected categories."""
        events: dict[str, str] = {}
        for key in self.selected(persisted):
            events.update(self.events[key])
        return events

    def known_events(self) -> dict[str, str]:
        """Events of every category."""
        events: dict[str, str] = {}
        for family in self.events.values():
            events.update(family)
        return events

    def other_selected(self, persisted: str | None) -> bool:
        """Whether the synthetic "other" key is part of the selection."""
        return OTHER in self.extra_labels and OTHER in parse_selection(persisted)


def _freeze(events: dict[str, dict[str, str]]) -> Mapping[str, EventMap]:
    return MappingProxyType({k: MappingProxyType(v) for k, v in events.items()})


def _module_events(component: str, *specific: str) -> dict[str, str]:
    names = ("course_module_viewed", *specific)
    return {f"\\{component}\\event\\{name}": name for name in names}


CORE_EVENTS = _freeze({
    "management": {
        "\\core\\event\\course_created": "course_created",
        "\\core\\event\\course_updated": "course_updated",
        "\\core\\event\\course_module_created": "course_module_created",
        "\\core\\event\\course_module_updated": "course_module_updated",
    },
    "authentication": {
        "\\core\\event\\user_loggedin": "user_loggedin",
        "\\core\\event\\user_loggedout": "user_loggedout",
    },
    "navigation": {
        "\\core\\event\\course_viewed": "course_viewed",
        "\\core\\event\\course_category_viewed": "course_category_viewed",
        "\\core\\event\\user_profile_viewed": "user_profile_viewed",
    },
    "completion": {
        "\\core\\event\\course_completed": "course_completed",
        "\\core\\event\\course_module_completion_updated": "course_module_completion_updated",
    },
    "grading": {
        "\\core\\event\\user_graded": "user_graded",
    },
})

CORE_LABELS = {
    "management": "Course and activity management",
    "authentication": "Authentication",
    "navigation": "Navigation",
    "completion": "Completion",
    "grading": "Grading",
}

MOODLE_COMPONENTS = _freeze({
    "mod_assign": _module_events("mod_assign", "assessable_submitted"),
    "mod_book": _module_events("mod_book", "chapter_viewed"),
    "mod_chat": _module_events("mod_chat", "message_sent"),
    "mod_choice": _module_events("mod_choice", "answer_created"),
    "mod_data": _module_events("mod_data", "record_created"),
    "mod_feedback": _module_events("mod_feedback", "response_submitted"),
    "mod_folder": _module_events("mod_folder"),
    "mod_forum": _module_events("mod_forum", "discussion_created", "post_created"),
    "mod_glossary": _module_events("mod_glossary", "entry_created"),
    "mod_imscp": _module_events("mod_imscp"),
    "mod_lesson": _module_events("mod_lesson", "lesson_ended"),
    "mod_lti": _module_events("mod_lti"),
    "mod_page": _module_events("mod_page"),
    "mod_quiz": _module_events("mod_quiz", "attempt_started", "attempt_submitted"),
    "mod_resource": _module_events("mod_resource"),
    "mod_scorm": _module_events("mod_scorm", "sco_launched"),
    "mod_survey": _module_events("mod_survey", "response_submitted"),
    "mod_url": _module_events("mod_url"),
    "mod_wiki": _module_events("mod_wiki", "page_updated"),
    "mod_workshop": _module_events("mod_workshop", "submission_created"),
})

# Display name of each activity module, keyed by module type
MODULE_NAMES = {
    "assign": "Assignment",
    "book": "Book",
    "chat": "Chat",
    "choice": "Choice",
    "data": "Database",
    "feedback": "Feedback",
    "folder": "Folder",
    "forum": "Forum",
    "glossary": "Glossary",
    "imscp": "IMS content package",
    "lesson": "Lesson",
    "lti": "External tool",
    "page": "Page",
    "quiz": "Quiz",
    "resource": "File",
    "scorm": "SCORM package",
    "survey": "Survey",
    "url": "URL",
    "wiki": "Wiki",
    "workshop": "Workshop",
}

ADDITIONAL_COMPONENTS = _freeze({
    "mod_h5pactivity": {
        "\\mod_h5pactivity\\event\\course_module_viewed": "course_module_viewed",
        "\\mod_h5pactivity\\event\\statement_received": "statement_received",
    },
    "mod_hvp": {
        "\\mod_hvp\\event\\course_module_viewed": "course_module_viewed",
        "\\mod_hvp\\event\\attempt_submitted": "attempt_submitted",
    },
    "mod_customcert": {
        "\\mod_customcert\\event\\course_module_viewed": "course_module_viewed",
        "\\mod_customcert\\event\\issue_created": "issue_created",
    },
})

ADDITIONAL_LABELS = {
    "mod_h5pactivity": "H5P activities",
    "mod_hvp": "Interactive content (HVP)",
    "mod_customcert": "Custom certificates",
}

SCHEDULED_STATEMENTS = _freeze({
    "course_enrolments": {
        "course_enrolments": "course_enrolments",
    },
    "learner_inactivity": {
        "learner_inactivity": "learner_inactivity",
    },
})

SCHEDULED_LABELS = {
    "course_enrolments": "Course enrolments snapshot",
    "learner_inactivity": "Learner inactivity",
}


CORE = CategoryGroup(
    key="core",
    setting="core_events",
    events=CORE_EVENTS,
    labels=MappingProxyType(CORE_LABELS),
)

MOODLE = CategoryGroup(
    key="moodle_components",
    setting="moodle_components",
    events=MOODLE_COMPONENTS,
    labels=MappingProxyType({
        component: MODULE_NAMES[component.split("_", 1)[1]]
        for component in MOODLE_COMPONENTS
    }),
)

ADDITIONAL = CategoryGroup(
    key="additional_components",
    setting="additional_components",
    events=ADDITIONAL_COMPONENTS,
    labels=MappingProxyType(ADDITIONAL_LABELS),
    extra_labels=MappingProxyType({OTHER: "Other components"}),
)

SCHEDULED = CategoryGroup(
    key="scheduled_statements",
    setting="scheduled_statements",
    events=SCHEDULED_STATEMENTS,
    labels=MappingProxyType(SCHEDULED_LABELS),
)

GROUPS: Mapping[str, CategoryGroup] = MappingProxyType({
    group.key: group for group in (CORE, MOODLE, ADDITIONAL, SCHEDULED)
})


def get_group(key: str) -> CategoryGroup:
    """Get a category group by key."""
    try:
        return GROUPS[key]
    except KeyError:
        raise UnknownCategoryGroupError(key) from None
