"""
Health GraphQL type definitions
"""

import strawberry

from .scalars import BigInt


@strawberry.type
class Health:
    """Service status report."""

    version: str
    uptime: BigInt  # type: ignore[reportInvalidTypeForm]
    date: str
    database_latency: int
