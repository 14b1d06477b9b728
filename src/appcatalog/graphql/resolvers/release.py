from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...records import ReleaseRecord
from ..context import get_data_service_from_info

if TYPE_CHECKING:
    from ..types.app import App
    from ..types.release import Release

logger = get_logger(__name__)


def convert_record_to_graphql_release(record: ReleaseRecord) -> Release:
    """Convert a release record to the GraphQL Release type."""
    from ..types.release import Release as ReleaseType

    return ReleaseType(
        id=record["id"],
        app_id=record["appId"],
        version=record["version"],
        description=record["description"],
        download_url=record["downloadUrl"],
        web_url=record["webUrl"],
        created_at=record["createdAt"],
        updated_at=record["updatedAt"],
    )


async def resolve_release_by_id(info: strawberry.Info, id: int) -> Release | None:
    data = get_data_service_from_info(info)
    record = await data.release.get_by_id(id)
    if record is None:
        logger.info("Release not found", release_id=id)
        return None
    return convert_record_to_graphql_release(record)


async def resolve_release_app(release: Release, info: strawberry.Info) -> App | None:
    from .app import convert_record_to_graphql_app

    data = get_data_service_from_info(info)
    record = await data.app.get_by_id(release.app_id)
    if record is None:
        logger.warning(
            "Release references a missing app", release_id=release.id, app_id=release.app_id
        )
        return None
    return convert_record_to_graphql_app(record)
