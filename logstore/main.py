"""
LRS Logstore API - FastAPI Application

Main entry point for the FastAPI application.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from logstore.api import router as api_router
from logstore.core.config import get_plugin_defaults, get_settings
from logstore.core.exceptions import InvalidTargetError, NotFoundError, UnknownCategoryGroupError
from logstore.db.base import Base
from logstore.db import models_registry  # noqa: F401 - Import to register models
from logstore.db.session import async_session_maker, engine
from logstore.services.plugin_config_service import PluginConfigService

settings = get_settings()


async def init_database() -> None:
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def install_plugin() -> None:
    """Write the plugin default settings that are not configured yet."""
    async with async_session_maker() as db:
        written = await PluginConfigService(db).install(
            settings.plugin_name, get_plugin_defaults().items()
        )
    if not written:
        logger.info(f"Plugin {settings.plugin_name} already installed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting LRS Logstore API...")

    # Ensure data directory exists
    data_path = Path(settings.data_save_folder)
    data_path.mkdir(parents=True, exist_ok=True)

    await init_database()
    await install_plugin()

    logger.info(f"LRS Logstore API started on port {settings.port}")

    yield

    # Shutdown
    logger.info("Shutting down LRS Logstore API...")
    await engine.dispose()
    logger.info("LRS Logstore API stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="LRS Logstore API - xAPI logging configuration",
    lifespan=lifespan,
    docs_url="/swagger" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


# Exception handlers
@app.exception_handler(NotFoundError)
@app.exception_handler(UnknownCategoryGroupError)
async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    """Missing records and unknown groups."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"Code": 404, "Message": str(exc)},
    )


@app.exception_handler(InvalidTargetError)
async def invalid_target_handler(request: Request, exc: InvalidTargetError) -> JSONResponse:
    """Targets outside the known LRS."""
    return JSONResponse(
        status_code=422,
        content={"Code": 422, "Message": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"Code": 500, "Message": str(exc)},
    )


# Include API router
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "logstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
