"""
``appcatalog`` command line: run the API server or probe the database.
"""

import asyncio
import os
import sys

import click
import uvicorn

from appcatalog import __version__
from appcatalog.config import settings
from appcatalog.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")


@click.group()
@click.version_option(version=__version__, prog_name="appcatalog")
def cli() -> None:
    """App Catalog backend."""


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Interface to bind")
@click.option("--port", default=settings.api_port, show_default=True, type=int, help="TCP port")
@click.option("--reload", is_flag=True, help="Restart on source changes (single worker)")
@click.option(
    "--workers",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of worker processes",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Run the GraphQL API under uvicorn."""
    log_level = log_level.lower()
    debug = log_level == "debug"
    configure_logging(debug=debug, level=log_level)

    # Workers import create_app afresh and read their settings from here
    os.environ["APPCATALOG_DEBUG"] = "true" if debug else "false"
    os.environ["APPCATALOG_LOG_LEVEL"] = log_level.upper()

    if reload and workers > 1:
        logger.warning("Ignoring --workers with --reload", workers=workers)
        workers = 1

    logger.info(
        "Starting App Catalog API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
    )
    try:
        uvicorn.run(
            "appcatalog.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            workers=workers,
            log_level=log_level,
            access_log=True,
        )
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


async def _probe_latency(database_url: str | None) -> int:
    from appcatalog.database import Database, create_database_engine

    engine = create_database_engine(settings, database_url=database_url)
    try:
        return await Database(engine).meta.test_latency()
    finally:
        await engine.dispose()


@cli.command("check-db")
@click.option(
    "--database-url",
    default=None,
    help="Database URL to probe (default: APPCATALOG_DATABASE_URL)",
)
def check_db(database_url: str | None) -> None:
    """Measure the round-trip latency to the database."""
    configure_logging(debug=False, level="WARNING")

    latency = asyncio.run(_probe_latency(database_url))

    # test_latency reports failures as 0
    if latency == 0:
        click.echo("✗ Database unreachable or latency below 1 ms", err=True)
        sys.exit(1)
    click.echo(f"✓ Database reachable, latency {latency} ms")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
