"""Activity service building xAPI activity definitions of course modules."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from logstore.core.exceptions import NotFoundError
from logstore.models.course import Course
from logstore.models.module import Module
from logstore.schemas.activity import ActivityDefinition
from logstore.services.base_service import BaseService
from logstore.services.localizer import Localizer


class ActivityService(BaseService[Module]):
    """Activity definitions of course modules."""

    def __init__(self, db: AsyncSession, localizer: Localizer):
        super().__init__(db, Module)
        self.localizer = localizer

    async def get_module(self, type: str, module_id: int) -> Module | None:
        """Get a module of a given type."""
        result = await self.db.execute(
            select(Module).where(Module.id == module_id, Module.type == type)
        )
        return result.scalar_one_or_none()

    async def describe(
        self, type: str, module_id: int, uuid: str, full: bool = True
    ) -> ActivityDefinition:
        """Get the definition of a module activity.

        Without ``full``, only the identifiers are returned and nothing is
        read. With ``full``, the name (and the description when the module has
        an intro) are localized in the language of the module's course.

        Raises:
            NotFoundError: the module or its course does not exist.
        """
        if not full:
            return ActivityDefinition(type=type, uuid=uuid)

        module = await self.get_module(type, module_id)
        if module is None:
            raise NotFoundError(type, module_id)

        course = await self.db.get(Course, module.course_id)
        if course is None:
            raise NotFoundError("course", module.course_id)

        description = None
        if module.intro:
            description = self.localizer.localize(module.intro, course)

        return ActivityDefinition(
            type=type,
            uuid=uuid,
            name=self.localizer.localize(module.name, course),
            description=description,
        )
