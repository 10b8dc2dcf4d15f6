"""
Tests for the bookgraph command line
"""

from click.testing import CliRunner
from sqlalchemy import inspect

from bookgraph import __version__
from bookgraph.cli import cli
from bookgraph.database.connection import get_engine, reset_database


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_init_db_creates_tables(test_database):
    reset_database()
    try:
        result = CliRunner().invoke(cli, ["init-db", "--database-url", test_database])

        assert result.exit_code == 0, result.output
        assert "Tables created" in result.output
        tables = set(inspect(get_engine()).get_table_names())
        assert {"authors", "books", "users"} <= tables
    finally:
        get_engine().dispose()
        reset_database()


def test_migrate_upgrade_then_current(test_database):
    runner = CliRunner()

    result = runner.invoke(cli, ["migrate", "--database-url", test_database, "upgrade"])
    assert result.exit_code == 0, result.output
    assert "Upgraded to head" in result.output

    result = runner.invoke(cli, ["migrate", "--database-url", test_database, "current"])
    assert result.exit_code == 0, result.output
    assert "20250101_000000_initial_schema" in result.output


def test_migrate_history_lists_initial_revision():
    result = CliRunner().invoke(cli, ["migrate", "history"])

    assert result.exit_code == 0, result.output
    assert "Initial schema" in result.output


def test_migrate_failure_exits_non_zero(test_database):
    result = CliRunner().invoke(
        cli, ["migrate", "--database-url", test_database, "upgrade", "no-such-revision"]
    )

    assert result.exit_code == 1
