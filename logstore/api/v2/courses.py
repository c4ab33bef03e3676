"""Course LRS target API endpoints."""

from fastapi import APIRouter, Query

from logstore.core.deps import Config, DBSession
from logstore.schemas.setting import CourseTargetDTO, CourseTargetUpdate, SettingDTO
from logstore.services.config_service import COURSE
from logstore.services.settings_service import SettingsService

router = APIRouter()


@router.get("/{course_id}/target", response_model=CourseTargetDTO)
async def get_course_target(
    course_id: int,
    config: Config,
    at: int | None = Query(None, description="Unix timestamp (seconds)"),
) -> CourseTargetDTO:
    """
    Get the effective LRS target of a course.

    - **course_id**: Course ID
    - **at**: Resolve the target at this time instead of now
    """
    setting = await config.course_setting(course_id, at)
    return CourseTargetDTO(
        course_id=course_id,
        target=config.resolve_target(setting),
        at=at,
        is_default=setting is None,
    )


@router.put("/{course_id}/target", response_model=CourseTargetDTO)
async def set_course_target(
    course_id: int,
    data: CourseTargetUpdate,
    config: Config,
) -> CourseTargetDTO:
    """
    Record a new LRS target for a course.

    - **course_id**: Course ID
    - **target**: 0 (no LRS), 1 (main LRS) or 2 (secondary LRS)
    """
    await config.set_course_target(course_id, data.target)
    return CourseTargetDTO(
        course_id=course_id,
        target=await config.course_target(course_id),
    )


@router.get("/{course_id}/target/history", response_model=list[SettingDTO])
async def get_course_target_history(
    course_id: int,
    db: DBSession,
) -> list[SettingDTO]:
    """Get every target recorded for a course, oldest first."""
    history = await SettingsService(db).get_history(COURSE, course_id)
    return [SettingDTO.model_validate(record) for record in history.records]
