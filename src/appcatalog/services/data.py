"""
Service layer over the catalog database.

Thin delegation to the data access layer, grouped by entity, plus the two
join-table indirections (authors, maintainers) and the health report.
"""

from __future__ import annotations

import time
from email.utils import formatdate

from .. import __version__
from ..database.access import Database
from ..records import (
    AppRecord,
    CategoryRecord,
    HealthRecord,
    PersonRecord,
    ReleaseRecord,
    UserRecord,
)

# Reference point for uptime reporting
PROCESS_STARTED_AT = time.monotonic()


class UserService:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def get_by_id(self, id: str) -> UserRecord | None:
        """Fetch a user, creating it on first sight."""
        return await self._db.user.add({"id": id})


class CategoryService:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def get_by_id(self, id: int) -> CategoryRecord | None:
        return await self._db.category.get_by_id(id)

    async def get_by_app_id(self, app_id: int) -> list[CategoryRecord]:
        return await self._db.category.get_by_app_id(app_id)

    async def get_all(self) -> list[CategoryRecord]:
        return await self._db.category.get_all()


class AppService:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def get_by_id(self, id: int) -> AppRecord | None:
        return await self._db.app.get_by_id(id)

    async def get_by_category_id(self, category_id: int) -> list[AppRecord]:
        return await self._db.app.get_by_category_id(category_id)

    async def get_by_person_id(self, person_id: int) -> list[AppRecord]:
        return await self._db.app.get_by_person_id(person_id)


class PersonService:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def get_by_id(self, id: int) -> PersonRecord | None:
        return await self._db.person.get_by_id(id)

    async def get_all(self) -> list[PersonRecord]:
        return await self._db.person.get_all()

    async def get_authors_by_app_id(self, app_id: int) -> list[PersonRecord]:
        rows = await self._db.app_author_map.get_all_by_app_id(app_id)
        return await self._db.person.get_by_ids([row["personId"] for row in rows])

    async def get_maintainers_by_app_id(self, app_id: int) -> list[PersonRecord]:
        rows = await self._db.app_maintainer_map.get_all_by_app_id(app_id)
        return await self._db.person.get_by_ids([row["personId"] for row in rows])


class ReleaseService:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def get_by_id(self, id: int) -> ReleaseRecord | None:
        return await self._db.release.get_by_id(id)

    async def get_by_app_id(self, app_id: int) -> list[ReleaseRecord]:
        return await self._db.release.get_by_app_id(app_id)


class MetaService:
    def __init__(self, db: Database, version: str, started_at: float) -> None:
        self._db = db
        self._version = version
        self._started_at = started_at

    async def health(self) -> HealthRecord:
        """Version, uptime, current time and database latency, computed per call."""
        return {
            "version": self._version,
            "uptime": int((time.monotonic() - self._started_at) * 1000),
            "date": formatdate(usegmt=True),
            "databaseLatency": await self._db.meta.test_latency(),
        }


class DataService:
    """Entity-oriented facade handed to the GraphQL resolvers."""

    def __init__(
        self,
        db: Database,
        version: str = __version__,
        started_at: float = PROCESS_STARTED_AT,
    ) -> None:
        self.db = db
        self.user = UserService(db)
        self.category = CategoryService(db)
        self.app = AppService(db)
        self.person = PersonService(db)
        self.release = ReleaseService(db)
        self.meta = MetaService(db, version, started_at)
