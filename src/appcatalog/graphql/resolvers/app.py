from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...records import AppRecord
from ..context import get_data_service_from_info
from .category import convert_record_to_graphql_category
from .person import convert_record_to_graphql_person
from .release import convert_record_to_graphql_release

if TYPE_CHECKING:
    from ..types.app import App
    from ..types.category import Category
    from ..types.person import Person
    from ..types.release import Release

logger = get_logger(__name__)


def convert_record_to_graphql_app(record: AppRecord) -> App:
    """Convert an app record to the GraphQL App type."""
    from ..types.app import App as AppType

    return AppType(
        id=record["id"],
        name=record["name"],
        description=record["description"],
        icon_url=record["iconUrl"],
        screenshot_urls=list(record["screenshotUrls"] or []),
        repo_url=record["repoUrl"],
        license=record["license"],
        created_at=record["createdAt"],
        updated_at=record["updatedAt"],
    )


async def resolve_app_by_id(info: strawberry.Info, id: int) -> App | None:
    data = get_data_service_from_info(info)
    record = await data.app.get_by_id(id)
    if record is None:
        logger.info("App not found", app_id=id)
        return None
    return convert_record_to_graphql_app(record)


async def resolve_app_authors(app: App, info: strawberry.Info) -> list[Person]:
    data = get_data_service_from_info(info)
    records = await data.person.get_authors_by_app_id(app.id)
    return [convert_record_to_graphql_person(record) for record in records]


async def resolve_app_maintainers(app: App, info: strawberry.Info) -> list[Person]:
    data = get_data_service_from_info(info)
    records = await data.person.get_maintainers_by_app_id(app.id)
    return [convert_record_to_graphql_person(record) for record in records]


async def resolve_app_categories(app: App, info: strawberry.Info) -> list[Category]:
    data = get_data_service_from_info(info)
    records = await data.category.get_by_app_id(app.id)
    return [convert_record_to_graphql_category(record) for record in records]


async def resolve_app_releases(app: App, info: strawberry.Info) -> list[Release]:
    data = get_data_service_from_info(info)
    records = await data.release.get_by_app_id(app.id)
    return [convert_record_to_graphql_release(record) for record in records]
