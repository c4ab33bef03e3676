"""API v2 router initialization."""

from fastapi import APIRouter

from logstore.api.v2.activities import router as activities_router
from logstore.api.v2.config import router as config_router
from logstore.api.v2.courses import router as courses_router

router = APIRouter()

router.include_router(config_router, prefix="/config", tags=["Config"])
router.include_router(courses_router, prefix="/courses", tags=["Courses"])
router.include_router(activities_router, prefix="/activities", tags=["Activities"])
