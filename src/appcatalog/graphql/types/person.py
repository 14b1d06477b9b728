"""
Person GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .scalars import BigInt

if TYPE_CHECKING:
    from .app import App


@strawberry.type
class Person:
    """Author or maintainer of catalog apps."""

    id: int
    name: str
    email: str | None
    web_url: str | None
    created_at: BigInt  # type: ignore[reportInvalidTypeForm]
    updated_at: BigInt  # type: ignore[reportInvalidTypeForm]

    @strawberry.field
    async def apps(self, info: strawberry.Info) -> list[Annotated["App", strawberry.lazy(".app")]]:
        """Apps this person both authors and maintains."""
        from ..resolvers.person import resolve_person_apps

        return await resolve_person_apps(self, info)
