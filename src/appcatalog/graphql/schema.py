"""
Catalog GraphQL schema and its FastAPI router
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .loaders import Loaders
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query)


class SchemaValidationError(RuntimeError):
    """The schema cannot be served."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("GraphQL schema validation failed: " + "; ".join(problems))
        self.problems = problems


def validate_schema() -> None:
    """Fail fast on an unusable schema.

    Runs graphql-core's structural validation, then the introspection query
    that GraphiQL and client generators send first. Lazy type references that
    do not resolve surface in one of the two.

    Raises:
        SchemaValidationError: listing every problem found
    """
    graphql_schema = schema._schema

    problems = [str(e) for e in gql_validate_schema(graphql_schema)]
    if not problems:
        result = graphql_sync(graphql_schema, get_introspection_query())
        problems = [str(e) for e in result.errors or ()]

    if problems:
        logger.error("GraphQL schema validation failed", problems=problems)
        raise SchemaValidationError(problems)

    logger.info("GraphQL schema validation successful", types=len(graphql_schema.type_map))


async def get_context(request: Request) -> dict[str, Any]:
    """Per-request resolver context: the request, the data service and fresh loaders."""
    return {
        "request": request,
        "data": request.app.state.data,
        "loaders": Loaders(),
    }


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
