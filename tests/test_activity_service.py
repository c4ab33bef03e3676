"""Tests for activity definitions."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from logstore.core.exceptions import NotFoundError
from logstore.models.course import Course
from logstore.models.module import Module
from logstore.services.activity_service import ActivityService
from logstore.services.localizer import Localizer


@pytest.mark.asyncio
async def test_describe_not_full_reads_nothing():
    """Test a minimal definition makes no store or localizer call."""
    db = MagicMock()
    db.execute = AsyncMock()
    db.get = AsyncMock()
    localizer = MagicMock(spec=Localizer)

    service = ActivityService(db, localizer)
    activity = await service.describe("forum", 5, "u1", full=False)

    assert activity.to_dict() == {"type": "forum", "uuid": "u1"}
    db.execute.assert_not_called()
    db.get.assert_not_called()
    localizer.localize.assert_not_called()


@pytest.mark.asyncio
async def test_describe_full_with_intro(db_session, sample_modules: list[Module]):
    """Test a full definition carries name and description."""
    service = ActivityService(db_session, Localizer("en"))

    activity = await service.describe("forum", 5, "u1")

    assert activity.to_dict() == {
        "type": "forum",
        "uuid": "u1",
        "name": {"en": "News forum"},
        "description": {"en": "General news and announcements"},
    }


@pytest.mark.asyncio
async def test_describe_full_empty_intro_omits_description(
    db_session, sample_modules: list[Module]
):
    """Test an empty intro gives no description key at all."""
    service = ActivityService(db_session, Localizer("en"))

    activity = await service.describe("page", 6, "u2")
    data = activity.to_dict()

    assert data["name"] == {"en": "Syllabus"}
    assert "description" not in data


@pytest.mark.asyncio
async def test_describe_localizes_in_course_language(
    db_session, sample_modules: list[Module]
):
    """Test names are localized against the module's course."""
    service = ActivityService(db_session, Localizer("en"))

    activity = await service.describe("quiz", 7, "u3")

    assert activity.name == {"fr": "Quiz final"}
    assert activity.description == {"fr": "Répondez à toutes les questions"}


@pytest.mark.asyncio
async def test_describe_missing_module(db_session, sample_modules: list[Module]):
    """Test a missing module raises NotFoundError."""
    service = ActivityService(db_session, Localizer("en"))

    with pytest.raises(NotFoundError) as exc_info:
        await service.describe("forum", 404, "u4")
    assert exc_info.value.kind == "forum"
    assert exc_info.value.id == 404


@pytest.mark.asyncio
async def test_describe_module_of_other_type(db_session, sample_modules: list[Module]):
    """Test a module is only found under its own type."""
    service = ActivityService(db_session, Localizer("en"))

    with pytest.raises(NotFoundError):
        await service.describe("quiz", 5, "u5")


@pytest.mark.asyncio
async def test_describe_missing_course(db_session, sample_modules: list[Module]):
    """Test a module whose course is missing raises NotFoundError."""
    service = ActivityService(db_session, Localizer("en"))

    with pytest.raises(NotFoundError) as exc_info:
        await service.describe("forum", 8, "u6")
    assert exc_info.value.kind == "course"
    assert exc_info.value.id == 99


def test_activity_id():
    """Test activity IRI building."""
    from logstore.schemas.activity import ActivityDefinition

    activity = ActivityDefinition(type="forum", uuid="abc")
    assert activity.activity_id("http://lms.test") == "http://lms.test/xapi/activities/forum/abc"


def test_localizer_language_codes():
    """Test course language codes become xAPI language tags."""
    localizer = Localizer("en")

    assert localizer.lang(Course(lang=None)) == "en"
    assert localizer.lang(Course(lang="en_us")) == "en-US"
    assert localizer.lang(Course(lang="fr")) == "fr"


def test_localizer_multilang_fallbacks():
    """Test multilang blocks fall back to the primary language, then the first block."""
    localizer = Localizer("en")
    raw = '<span class="multilang" lang="de">Hallo</span><span class="multilang" lang="fr">Salut</span>'

    assert localizer.localize(raw, Course(lang="fr_ca")) == {"fr-CA": "Salut"}
    assert localizer.localize(raw, Course(lang="es")) == {"es": "Hallo"}
    assert localizer.localize("Plain &amp; <b>simple</b>", Course(lang=None)) == {
        "en": "Plain & simple"
    }


def test_localizer_mixed_multilang_syntaxes():
    """Test span and mlang blocks in the same string are both filtered."""
    localizer = Localizer("en")
    raw = (
        '<span class="multilang" lang="en">Week 1</span>'
        '<span class="multilang" lang="fr">Semaine 1</span>'
        ": {mlang en}Introduction{mlang}{mlang fr}Présentation{mlang}"
    )

    assert localizer.localize(raw, Course(lang="fr")) == {"fr": "Semaine 1: Présentation"}
    assert localizer.localize(raw, Course(lang=None)) == {"en": "Week 1: Introduction"}
