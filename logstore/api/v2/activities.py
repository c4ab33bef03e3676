"""Activity definition API endpoints."""

from typing import Any

from fastapi import APIRouter, Query

from logstore.core.config import get_settings
from logstore.core.deps import DBSession
from logstore.services.activity_service import ActivityService
from logstore.services.localizer import Localizer

router = APIRouter()


@router.get("/{type}/{module_id}")
async def get_activity(
    type: str,
    module_id: int,
    db: DBSession,
    uuid: str = Query(..., description="Stable identifier of the activity"),
    full: bool = Query(True, description="Include the localized name and description"),
) -> dict[str, Any]:
    """
    Get the definition of a module activity.

    - **type**: Module type (forum, quiz...)
    - **module_id**: Module ID
    - **uuid**: Activity UUID
    - **full**: Include name and description
    """
    settings = get_settings()
    activity_service = ActivityService(db, Localizer(settings.default_lang))
    activity = await activity_service.describe(type, module_id, uuid, full)

    data = activity.to_dict()
    data["id"] = activity.activity_id(settings.platform_iri)
    return data
