"""
Release GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .scalars import BigInt

if TYPE_CHECKING:
    from .app import App


@strawberry.type
class Release:
    """Published version of an app."""

    id: int
    app_id: int
    version: str
    description: str | None
    download_url: str
    web_url: str | None
    created_at: BigInt  # type: ignore[reportInvalidTypeForm]
    updated_at: BigInt  # type: ignore[reportInvalidTypeForm]

    @strawberry.field
    async def app(self, info: strawberry.Info) -> Annotated["App", strawberry.lazy(".app")]:
        """The app this release belongs to."""
        from ..resolvers.release import resolve_release_app

        return await resolve_release_app(self, info)
