"""
App GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .scalars import BigInt

if TYPE_CHECKING:
    from .category import Category
    from .person import Person
    from .release import Release


@strawberry.type
class App:
    """Catalog application."""

    id: int
    name: str
    description: str | None
    icon_url: str | None
    screenshot_urls: list[str]
    repo_url: str | None
    license: str | None
    created_at: BigInt  # type: ignore[reportInvalidTypeForm]
    updated_at: BigInt  # type: ignore[reportInvalidTypeForm]

    @strawberry.field
    async def authors(
        self, info: strawberry.Info
    ) -> list[Annotated["Person", strawberry.lazy(".person")]]:
        """People who wrote this app."""
        from ..resolvers.app import resolve_app_authors

        return await resolve_app_authors(self, info)

    @strawberry.field
    async def maintainers(
        self, info: strawberry.Info
    ) -> list[Annotated["Person", strawberry.lazy(".person")]]:
        """People who maintain this app."""
        from ..resolvers.app import resolve_app_maintainers

        return await resolve_app_maintainers(self, info)

    @strawberry.field
    async def categories(
        self, info: strawberry.Info
    ) -> list[Annotated["Category", strawberry.lazy(".category")]]:
        """Categories this app is listed under."""
        from ..resolvers.app import resolve_app_categories

        return await resolve_app_categories(self, info)

    @strawberry.field
    async def releases(
        self, info: strawberry.Info
    ) -> list[Annotated["Release", strawberry.lazy(".release")]]:
        """Published releases of this app."""
        from ..resolvers.app import resolve_app_releases

        return await resolve_app_releases(self, info)
