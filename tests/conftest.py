"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from logstore.core.config import BUILTIN_PLUGIN_DEFAULTS
from logstore.core.deps import get_db
from logstore.db.base import Base
from logstore.db import models_registry  # noqa: F401 - Import to register models
from logstore.main import app
from logstore.models.course import Course
from logstore.models.module import Module
from logstore.services.plugin_config_service import PluginConfigService

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

PLUGIN = "logstore_trax"


class FakeClock:
    """Settable clock returning Unix seconds."""

    def __init__(self, start: int = 1_700_000_000):
        self.time = start

    def __call__(self) -> int:
        return self.time

    def advance(self, seconds: int) -> int:
        self.time += seconds
        return self.time


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with overridden dependencies."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def clock() -> FakeClock:
    """Create a settable clock."""
    return FakeClock()


@pytest_asyncio.fixture(scope="function")
async def installed_plugin(db_session: AsyncSession) -> PluginConfigService:
    """Install the plugin default settings."""
    service = PluginConfigService(db_session)
    await service.install(PLUGIN, BUILTIN_PLUGIN_DEFAULTS.items())
    return service


@pytest_asyncio.fixture(scope="function")
async def sample_courses(db_session: AsyncSession) -> list[Course]:
    """Create sample courses."""
    courses = [
        Course(id=1, fullname="Introduction to Biology", shortname="BIO101", lang=None),
        Course(id=2, fullname="Histoire de France", shortname="HIST-FR", lang="fr"),
    ]
    for course in courses:
        db_session.add(course)
    await db_session.commit()
    return courses


@pytest_asyncio.fixture(scope="function")
async def sample_modules(
    db_session: AsyncSession, sample_courses: list[Course]
) -> list[Module]:
    """Create sample modules."""
    modules = [
        Module(
            id=5,
            type="forum",
            course_id=1,
            name="News forum",
            intro="<p>General news and announcements</p>",
        ),
        Module(id=6, type="page", course_id=1, name="Syllabus", intro=""),
        Module(
            id=7,
            type="quiz",
            course_id=2,
            name='<span lang="en" class="multilang">Final quiz</span>'
                 '<span lang="fr" class="multilang">Quiz final</span>',
            intro="{mlang en}Answer all questions{mlang}{mlang fr}Répondez à toutes les questions{mlang}",
        ),
        # Orphan module: its course does not exist
        Module(id=8, type="forum", course_id=99, name="Lost forum", intro=None),
    ]
    for module in modules:
        db_session.add(module)
    await db_session.commit()
    return modules
