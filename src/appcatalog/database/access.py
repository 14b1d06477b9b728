"""
Data access layer for the application catalog

Each accessor group issues exactly one SQL statement per lookup (user
provisioning excepted) and hands rows back through the record mapper.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any, cast

from sqlalchemy import Table, select, text, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.expression import Executable, Select

from ..dbmodels import (
    App,
    AppAuthorMap,
    AppCategoryMap,
    AppMaintainerMap,
    Category,
    Person,
    Release,
    User,
)
from ..logging import get_logger
from ..mapper import to_external_case, to_internal_case
from ..records import (
    AppAuthorMapRecord,
    AppCategoryMapRecord,
    AppMaintainerMapRecord,
    AppRecord,
    CategoryRecord,
    PersonRecord,
    ReleaseRecord,
    UserInput,
    UserPatch,
    UserRecord,
)

logger = get_logger(__name__)

app_table = cast(Table, App.__table__)
app_author_map_table = cast(Table, AppAuthorMap.__table__)
app_category_map_table = cast(Table, AppCategoryMap.__table__)
app_maintainer_map_table = cast(Table, AppMaintainerMap.__table__)
category_table = cast(Table, Category.__table__)
person_table = cast(Table, Person.__table__)
release_table = cast(Table, Release.__table__)
user_table = cast(Table, User.__table__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def insert_ignoring_conflicts(
    dialect_name: str, table: Table, values: dict[str, Any]
) -> Executable:
    """Build an INSERT that does nothing when the row already exists."""
    if dialect_name == "postgresql":
        return pg_insert(table).values(**values).on_conflict_do_nothing()
    if dialect_name == "sqlite":
        return sqlite_insert(table).values(**values).on_conflict_do_nothing()
    raise NotImplementedError(f"Conflict-ignoring insert not supported for {dialect_name}")


class Accessor:
    """Shared fetch helpers bound to the injected engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def _fetch_one(self, stmt: Select[Any]) -> dict[str, Any] | None:
        async with self._engine.connect() as conn:
            result = await conn.execute(stmt)
            row = result.mappings().first()
        return to_external_case(row) if row is not None else None

    async def _fetch_all(self, stmt: Select[Any]) -> list[dict[str, Any]]:
        async with self._engine.connect() as conn:
            result = await conn.execute(stmt)
            rows = result.mappings().all()
        return [to_external_case(row) for row in rows]


class AppAccessor(Accessor):
    async def get_by_id(self, id: int) -> AppRecord | None:
        stmt = select(app_table).where(app_table.c.id == id)
        return cast("AppRecord | None", await self._fetch_one(stmt))

    async def get_by_ids(self, ids: Sequence[int]) -> list[AppRecord]:
        if not ids:
            return []
        stmt = select(app_table).where(app_table.c.id.in_(ids))
        return cast("list[AppRecord]", await self._fetch_all(stmt))

    async def get_by_category_id(self, category_id: int) -> list[AppRecord]:
        stmt = (
            select(app_table)
            .join_from(
                app_category_map_table,
                app_table,
                app_table.c.id == app_category_map_table.c.app_id,
            )
            .where(app_category_map_table.c.category_id == category_id)
        )
        return cast("list[AppRecord]", await self._fetch_all(stmt))

    async def get_by_person_id(self, person_id: int) -> list[AppRecord]:
        """Apps where the person is listed as both author and maintainer.

        Both join tables are filtered on the same person id, so a person who
        only authors (or only maintains) an app does not match it.
        """
        stmt = (
            select(app_table)
            .join(app_author_map_table, app_table.c.id == app_author_map_table.c.app_id)
            .join(app_maintainer_map_table, app_table.c.id == app_maintainer_map_table.c.app_id)
            .where(
                app_author_map_table.c.person_id == person_id,
                app_maintainer_map_table.c.person_id == person_id,
            )
        )
        return cast("list[AppRecord]", await self._fetch_all(stmt))


class AppAuthorMapAccessor(Accessor):
    async def get_all_by_person_id(self, person_id: int) -> list[AppAuthorMapRecord]:
        stmt = select(app_author_map_table).where(app_author_map_table.c.person_id == person_id)
        return cast("list[AppAuthorMapRecord]", await self._fetch_all(stmt))

    async def get_all_by_app_id(self, app_id: int) -> list[AppAuthorMapRecord]:
        stmt = select(app_author_map_table).where(app_author_map_table.c.app_id == app_id)
        return cast("list[AppAuthorMapRecord]", await self._fetch_all(stmt))


class AppMaintainerMapAccessor(Accessor):
    async def get_all_by_person_id(self, person_id: int) -> list[AppMaintainerMapRecord]:
        stmt = select(app_maintainer_map_table).where(
            app_maintainer_map_table.c.person_id == person_id
        )
        return cast("list[AppMaintainerMapRecord]", await self._fetch_all(stmt))

    async def get_all_by_app_id(self, app_id: int) -> list[AppMaintainerMapRecord]:
        stmt = select(app_maintainer_map_table).where(app_maintainer_map_table.c.app_id == app_id)
        return cast("list[AppMaintainerMapRecord]", await self._fetch_all(stmt))


class AppCategoryMapAccessor(Accessor):
    async def get_all_by_category_id(self, category_id: int) -> list[AppCategoryMapRecord]:
        stmt = select(app_category_map_table).where(
            app_category_map_table.c.category_id == category_id
        )
        return cast("list[AppCategoryMapRecord]", await self._fetch_all(stmt))

    async def get_all_by_app_id(self, app_id: int) -> list[AppCategoryMapRecord]:
        stmt = select(app_category_map_table).where(app_category_map_table.c.app_id == app_id)
        return cast("list[AppCategoryMapRecord]", await self._fetch_all(stmt))


class CategoryAccessor(Accessor):
    async def get_by_id(self, id: int) -> CategoryRecord | None:
        stmt = select(category_table).where(category_table.c.id == id)
        return cast("CategoryRecord | None", await self._fetch_one(stmt))

    async def get_by_ids(self, ids: Sequence[int]) -> list[CategoryRecord]:
        if not ids:
            return []
        stmt = select(category_table).where(category_table.c.id.in_(ids))
        return cast("list[CategoryRecord]", await self._fetch_all(stmt))

    async def get_all(self) -> list[CategoryRecord]:
        return cast("list[CategoryRecord]", await self._fetch_all(select(category_table)))

    async def get_by_app_id(self, app_id: int) -> list[CategoryRecord]:
        stmt = (
            select(category_table)
            .join(
                app_category_map_table,
                category_table.c.id == app_category_map_table.c.category_id,
            )
            .where(app_category_map_table.c.app_id == app_id)
        )
        return cast("list[CategoryRecord]", await self._fetch_all(stmt))


class PersonAccessor(Accessor):
    async def get_by_id(self, id: int) -> PersonRecord | None:
        stmt = select(person_table).where(person_table.c.id == id)
        return cast("PersonRecord | None", await self._fetch_one(stmt))

    async def get_by_ids(self, ids: Sequence[int]) -> list[PersonRecord]:
        if not ids:
            return []
        stmt = select(person_table).where(person_table.c.id.in_(ids))
        return cast("list[PersonRecord]", await self._fetch_all(stmt))

    async def get_all(self) -> list[PersonRecord]:
        return cast("list[PersonRecord]", await self._fetch_all(select(person_table)))


class ReleaseAccessor(Accessor):
    async def get_by_id(self, id: int) -> ReleaseRecord | None:
        stmt = select(release_table).where(release_table.c.id == id)
        return cast("ReleaseRecord | None", await self._fetch_one(stmt))

    async def get_by_ids(self, ids: Sequence[int]) -> list[ReleaseRecord]:
        if not ids:
            return []
        stmt = select(release_table).where(release_table.c.id.in_(ids))
        return cast("list[ReleaseRecord]", await self._fetch_all(stmt))

    async def get_by_app_id(self, app_id: int) -> list[ReleaseRecord]:
        stmt = select(release_table).where(release_table.c.app_id == app_id)
        return cast("list[ReleaseRecord]", await self._fetch_all(stmt))


class UserAccessor(Accessor):
    async def get_by_id(self, id: str) -> UserRecord | None:
        stmt = select(user_table).where(user_table.c.id == id)
        return cast("UserRecord | None", await self._fetch_one(stmt))

    async def update(self, user_id: str, data: UserPatch) -> None:
        """Apply a partial patch; a missing user id updates nothing."""
        values = to_internal_case(data)
        if not values:
            return

        stmt = update(user_table).where(user_table.c.id == user_id).values(**values)
        async with self._engine.begin() as conn:
            await conn.execute(stmt)

    async def add(self, user: UserInput) -> UserRecord | None:
        """Insert the user unless it exists, then return the stored row.

        Timestamps are only written by the insert, so an existing user keeps
        its original ``createdAt``/``updatedAt``.
        """
        timestamp = now_ms()
        values = {**to_internal_case(user), "created_at": timestamp, "updated_at": timestamp}

        async with self._engine.begin() as conn:
            stmt = insert_ignoring_conflicts(conn.dialect.name, user_table, values)
            result = await conn.execute(stmt)
            if result.rowcount:
                logger.info("Provisioned new user", user_id=user["id"])

        return await self.get_by_id(user["id"])


class MetaAccessor(Accessor):
    async def test_latency(self) -> int:
        """Round-trip time of a trivial query in milliseconds, or 0 if unreachable."""
        try:
            before = time.perf_counter()
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return int((time.perf_counter() - before) * 1000)
        except Exception as e:
            logger.error("Failed to connect to the database", error=str(e))
            return 0


class Database:
    """Entry point to the catalog store, grouped by entity."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.app = AppAccessor(engine)
        self.app_author_map = AppAuthorMapAccessor(engine)
        self.app_category_map = AppCategoryMapAccessor(engine)
        self.app_maintainer_map = AppMaintainerMapAccessor(engine)
        self.category = CategoryAccessor(engine)
        self.person = PersonAccessor(engine)
        self.release = ReleaseAccessor(engine)
        self.user = UserAccessor(engine)
        self.meta = MetaAccessor(engine)
