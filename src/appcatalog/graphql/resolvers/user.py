from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ..types.user import User


async def resolve_user(info: strawberry.Info) -> User | None:
    """Placeholder for the top-level ``user`` query.

    The query takes no identity argument, so there is nothing to look up.
    """
    _ = info
    return None
