"""
FastAPI application serving the catalog over GraphQL

The application is built by ``create_app`` (used as a uvicorn factory). Its
lifespan owns the database engine: one engine per process, disposed on
shutdown, reached by request handlers through ``app.state.data``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..database import Database, create_database_engine
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..services.data import DataService

logger = get_logger(__name__)


def get_data_service(request: Request) -> DataService:
    return request.app.state.data


async def health_check(data: DataService = Depends(get_data_service)):
    """Version, uptime, server time and database latency."""
    return await data.meta.health()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    configure_logging(debug=settings.debug, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting App Catalog API...", environment=settings.environment)
        engine = create_database_engine(settings)
        app.state.data = DataService(Database(engine))
        try:
            yield
        finally:
            logger.info("Shutting down App Catalog API...")
            await engine.dispose()

    app = FastAPI(
        title="App Catalog API",
        description="GraphQL API over the application catalog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_api_route("/health", health_check, methods=["GET"], tags=["meta"])

    # A schema that fails validation must keep the server from starting
    validate_schema()
    app.include_router(create_graphql_router(graphiql=settings.graphiql))
    logger.info("GraphQL endpoint initialized", endpoint="/graphql", graphiql=settings.graphiql)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "appcatalog.api.app:create_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
