"""
Shared pytest fixtures and configuration for all tests.
"""

import asyncio
import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from appcatalog.database import Database
from appcatalog.dbmodels import (
    App,
    AppAuthorMap,
    AppCategoryMap,
    AppMaintainerMap,
    Category,
    Person,
    Release,
    target_metadata,
)
from appcatalog.services.data import DataService

CREATED_AT = 1_700_000_000_000
UPDATED_AT = 1_700_000_500_000

APPS = [
    {
        "id": 1,
        "name": "Pixel Editor",
        "description": "Raster image editor",
        "icon_url": "https://example.org/pixel.png",
        "screenshot_urls": ["https://example.org/pixel-1.png", "https://example.org/pixel-2.png"],
        "repo_url": "https://example.org/pixel.git",
        "license": "GPL-3.0",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    },
    {
        "id": 2,
        "name": "Notes",
        "description": None,
        "icon_url": None,
        "screenshot_urls": [],
        "repo_url": None,
        "license": "MIT",
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    },
    {
        "id": 3,
        "name": "Terminal",
        "description": "Terminal emulator",
        "icon_url": None,
        "screenshot_urls": ["https://example.org/term.png"],
        "repo_url": None,
        "license": None,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    },
]

CATEGORIES = [
    {"id": 10, "name": "Graphics", "description": "Drawing and photos"},
    {"id": 11, "name": "Productivity", "description": None},
    {"id": 12, "name": "Games", "description": "Nothing here yet"},
]

PEOPLE = [
    {"id": 100, "name": "Ada", "email": "ada@example.org", "web_url": None},
    {"id": 101, "name": "Grace", "email": None, "web_url": "https://grace.example.org"},
    {"id": 102, "name": "Linus", "email": "linus@example.org", "web_url": None},
    {"id": 103, "name": "Nobody", "email": None, "web_url": None},
]

RELEASES = [
    {
        "id": 1000,
        "app_id": 1,
        "version": "1.0.0",
        "description": "First release",
        "download_url": "https://example.org/pixel-1.0.0.tar.gz",
        "web_url": None,
    },
    {
        "id": 1001,
        "app_id": 1,
        "version": "1.1.0",
        "description": None,
        "download_url": "https://example.org/pixel-1.1.0.tar.gz",
        "web_url": "https://example.org/pixel/1.1.0",
    },
    {
        "id": 1002,
        "app_id": 2,
        "version": "0.9.0",
        "description": None,
        "download_url": "https://example.org/notes-0.9.0.tar.gz",
        "web_url": None,
    },
]

# Ada authors and maintains app 1; Grace only authors; Linus authors and
# maintains app 3 but only maintains app 2.
APP_AUTHORS = [
    {"app_id": 1, "person_id": 100},
    {"app_id": 1, "person_id": 101},
    {"app_id": 2, "person_id": 101},
    {"app_id": 3, "person_id": 102},
]
APP_MAINTAINERS = [
    {"app_id": 1, "person_id": 100},
    {"app_id": 2, "person_id": 102},
    {"app_id": 3, "person_id": 102},
]
APP_CATEGORIES = [
    {"app_id": 1, "category_id": 10},
    {"app_id": 2, "category_id": 10},
    {"app_id": 2, "category_id": 11},
]


def _stamped(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{"created_at": CREATED_AT, "updated_at": UPDATED_AT, **row} for row in rows]


async def create_catalog(engine: AsyncEngine) -> None:
    """Create the catalog schema and load the sample rows."""
    async with engine.begin() as conn:
        await conn.run_sync(target_metadata.create_all)
        await conn.execute(App.__table__.insert(), APPS)
        await conn.execute(Category.__table__.insert(), _stamped(CATEGORIES))
        await conn.execute(Person.__table__.insert(), _stamped(PEOPLE))
        await conn.execute(Release.__table__.insert(), _stamped(RELEASES))
        await conn.execute(AppAuthorMap.__table__.insert(), APP_AUTHORS)
        await conn.execute(AppMaintainerMap.__table__.insert(), APP_MAINTAINERS)
        await conn.execute(AppCategoryMap.__table__.insert(), APP_CATEGORIES)


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    """URL of a per-test SQLite file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture(scope="function")
def unreachable_database_url(tmp_path: Path) -> str:
    """URL of a SQLite file whose directory does not exist."""
    return f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'catalog.db'}"


@pytest.fixture(scope="function")
def seeded_database_url(database_url: str) -> str:
    """Build and seed the catalog outside of any running event loop."""

    async def build() -> None:
        engine = create_async_engine(database_url)
        try:
            await create_catalog(engine)
        finally:
            await engine.dispose()

    asyncio.run(build())
    return database_url


@pytest_asyncio.fixture(scope="function")
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Async engine over a freshly seeded catalog."""
    engine = create_async_engine(database_url)
    await create_catalog(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db(engine: AsyncEngine) -> Database:
    return Database(engine)


@pytest_asyncio.fixture(scope="function")
async def data_service(db: Database) -> DataService:
    return DataService(db, version="1.2.3")


@pytest_asyncio.fixture(scope="function")
async def unreachable_db(unreachable_database_url: str) -> AsyncGenerator[Database, None]:
    engine = create_async_engine(unreachable_database_url)
    yield Database(engine)
    await engine.dispose()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
