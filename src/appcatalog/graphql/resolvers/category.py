from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...records import CategoryRecord
from ..context import get_data_service_from_info

if TYPE_CHECKING:
    from ..types.app import App
    from ..types.category import Category

logger = get_logger(__name__)


def convert_record_to_graphql_category(record: CategoryRecord) -> Category:
    """Convert a category record to the GraphQL Category type."""
    from ..types.category import Category as CategoryType

    return CategoryType(
        id=record["id"],
        name=record["name"],
        description=record["description"],
        created_at=record["createdAt"],
        updated_at=record["updatedAt"],
    )


async def resolve_category_by_id(info: strawberry.Info, id: int) -> Category | None:
    data = get_data_service_from_info(info)
    record = await data.category.get_by_id(id)
    if record is None:
        logger.info("Category not found", category_id=id)
        return None
    return convert_record_to_graphql_category(record)


async def resolve_categories(info: strawberry.Info) -> list[Category]:
    data = get_data_service_from_info(info)
    return [convert_record_to_graphql_category(record) for record in await data.category.get_all()]


async def resolve_category_apps(category: Category, info: strawberry.Info) -> list[App]:
    from .app import convert_record_to_graphql_app

    data = get_data_service_from_info(info)
    records = await data.app.get_by_category_id(category.id)
    return [convert_record_to_graphql_app(record) for record in records]
