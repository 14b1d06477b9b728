"""
Category GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .scalars import BigInt

if TYPE_CHECKING:
    from .app import App


@strawberry.type
class Category:
    """Category grouping catalog apps."""

    id: int
    name: str
    description: str | None
    created_at: BigInt  # type: ignore[reportInvalidTypeForm]
    updated_at: BigInt  # type: ignore[reportInvalidTypeForm]

    @strawberry.field
    async def apps(self, info: strawberry.Info) -> list[Annotated["App", strawberry.lazy(".app")]]:
        """Apps listed under this category."""
        from ..resolvers.category import resolve_category_apps

        return await resolve_category_apps(self, info)
