from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...records import PersonRecord
from ..context import get_data_service_from_info

if TYPE_CHECKING:
    from ..types.app import App
    from ..types.person import Person

logger = get_logger(__name__)


def convert_record_to_graphql_person(record: PersonRecord) -> Person:
    """Convert a person record to the GraphQL Person type."""
    from ..types.person import Person as PersonType

    return PersonType(
        id=record["id"],
        name=record["name"],
        email=record["email"],
        web_url=record["webUrl"],
        created_at=record["createdAt"],
        updated_at=record["updatedAt"],
    )


async def resolve_person_by_id(info: strawberry.Info, id: int) -> Person | None:
    data = get_data_service_from_info(info)
    record = await data.person.get_by_id(id)
    if record is None:
        logger.info("Person not found", person_id=id)
        return None
    return convert_record_to_graphql_person(record)


async def resolve_people(info: strawberry.Info) -> list[Person]:
    data = get_data_service_from_info(info)
    return [convert_record_to_graphql_person(record) for record in await data.person.get_all()]


async def resolve_person_apps(person: Person, info: strawberry.Info) -> list[App]:
    from .app import convert_record_to_graphql_app

    data = get_data_service_from_info(info)
    records = await data.app.get_by_person_id(person.id)
    return [convert_record_to_graphql_app(record) for record in records]
