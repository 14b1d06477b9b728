"""
Database engine construction

The engine is created by the process entry point (the FastAPI lifespan or the
CLI) and handed to the data access layer, which never creates one itself.
"""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from ..config import Settings, get_async_database_url, settings as default_settings
from ..logging import get_logger

logger = get_logger(__name__)


def _postgres_connect_args(settings: Settings) -> dict[str, Any]:
    """asyncpg connection arguments derived from settings."""
    connect_args: dict[str, Any] = {
        "server_settings": {"application_name": settings.app_name},
    }
    if settings.database_ssl:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = context
    return connect_args


def create_database_engine(
    settings: Settings | None = None, database_url: str | None = None
) -> AsyncEngine:
    """Create the process-wide async engine (connection pool).

    Args:
        settings: Settings to read pool and connection options from
        database_url: Overrides ``settings.database_url`` when given

    Returns:
        A new AsyncEngine; the caller owns it and must dispose it.
    """
    settings = settings or default_settings
    url = get_async_database_url(database_url or settings.database_url)

    if url.startswith("postgresql+asyncpg://"):
        engine = create_async_engine(
            url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.sql_echo,
            connect_args=_postgres_connect_args(settings),
        )
    else:
        engine = create_async_engine(url, echo=settings.sql_echo)

    logger.info("Database engine created", dialect=engine.dialect.name)
    return engine
