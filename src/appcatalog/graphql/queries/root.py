"""
Root GraphQL query definitions
"""

import strawberry

from ..types.app import App
from ..types.category import Category
from ..types.health import Health
from ..types.person import Person
from ..types.release import Release
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def user(self, info: strawberry.Info) -> User | None:
        """Placeholder; resolves to null."""
        from ..resolvers.user import resolve_user

        return await resolve_user(info)

    @strawberry.field
    async def person(self, info: strawberry.Info, id: int) -> Person | None:
        """Get a person by ID."""
        from ..resolvers.person import resolve_person_by_id

        return await resolve_person_by_id(info, id)

    @strawberry.field
    async def people(self, info: strawberry.Info) -> list[Person]:
        """Get all people."""
        from ..resolvers.person import resolve_people

        return await resolve_people(info)

    @strawberry.field
    async def category(self, info: strawberry.Info, id: int) -> Category | None:
        """Get a category by ID."""
        from ..resolvers.category import resolve_category_by_id

        return await resolve_category_by_id(info, id)

    @strawberry.field
    async def categories(self, info: strawberry.Info) -> list[Category]:
        """Get all categories."""
        from ..resolvers.category import resolve_categories

        return await resolve_categories(info)

    @strawberry.field
    async def app(self, info: strawberry.Info, id: int) -> App | None:
        """Get an app by ID."""
        from ..resolvers.app import resolve_app_by_id

        return await resolve_app_by_id(info, id)

    @strawberry.field
    async def release(self, info: strawberry.Info, id: int) -> Release | None:
        """Get a release by ID."""
        from ..resolvers.release import resolve_release_by_id

        return await resolve_release_by_id(info, id)

    @strawberry.field
    async def health(self, info: strawberry.Info) -> Health:
        """Get service version, uptime and database latency."""
        from ..resolvers.meta import resolve_health

        return await resolve_health(info)
