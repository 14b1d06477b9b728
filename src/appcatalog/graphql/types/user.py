"""
User GraphQL type definitions
"""

import strawberry

from .scalars import BigInt


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: str
    name: str | None
    email: str | None
    avatar_url: str | None
    created_at: BigInt  # type: ignore[reportInvalidTypeForm]
    updated_at: BigInt  # type: ignore[reportInvalidTypeForm]
