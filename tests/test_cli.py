"""
Tests for the command line interface
"""

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from appcatalog import __version__
from appcatalog.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_db_reachable(seeded_database_url: str):
    with patch(
        "appcatalog.database.access.MetaAccessor.test_latency",
        new=AsyncMock(return_value=7),
    ):
        result = CliRunner().invoke(cli, ["check-db", "--database-url", seeded_database_url])

    assert result.exit_code == 0
    assert "latency 7 ms" in result.output


def test_check_db_unreachable(unreachable_database_url: str):
    result = CliRunner().invoke(cli, ["check-db", "--database-url", unreachable_database_url])

    assert result.exit_code == 1


def test_serve_runs_app_factory():
    with patch("appcatalog.cli.uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["serve", "--port", "9001", "--workers", "2"])

    assert result.exit_code == 0
    run.assert_called_once()
    args, kwargs = run.call_args
    assert args == ("appcatalog.api.app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 9001
    assert kwargs["workers"] == 2


def test_serve_reload_forces_single_worker():
    with patch("appcatalog.cli.uvicorn.run") as run:
        CliRunner().invoke(cli, ["serve", "--reload", "--workers", "4"])

    assert run.call_args.kwargs["workers"] == 1
