from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ..context import get_data_service_from_info

if TYPE_CHECKING:
    from ..types.health import Health


async def resolve_health(info: strawberry.Info) -> Health:
    from ..types.health import Health as HealthType

    data = get_data_service_from_info(info)
    report = await data.meta.health()
    return HealthType(
        version=report["version"],
        uptime=report["uptime"],
        date=report["date"],
        database_latency=report["databaseLatency"],
    )
