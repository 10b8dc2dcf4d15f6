#!/usr/bin/env python3
"""
Main CLI entry point for the bookgraph server.
"""

import os
import sys
from collections.abc import Callable

import click
import uvicorn

from alembic import command
from alembic.config import Config
from bookgraph import __version__
from bookgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookgraph")
def cli() -> None:
    """bookgraph CLI - run the server and manage the database schema."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=5500, type=int, help="Port to bind to (default: 5500)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the bookgraph API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting bookgraph API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are read at import time, so pass them through the environment
    if log_level == "debug":
        os.environ["BOOKGRAPH_DEBUG"] = "true"
        os.environ["BOOKGRAPH_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKGRAPH_DEBUG", "false")
        os.environ.setdefault("BOOKGRAPH_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "bookgraph.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookgraph.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Override BOOKGRAPH_DATABASE_URL")
def init_db(database_url: str | None) -> None:
    """Create the authors, books and users tables without running migrations."""
    from bookgraph.database.connection import create_tables, init_database

    configure_logging()

    try:
        init_database(database_url)
        create_tables()
        click.echo("✓ Tables created")
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)


@cli.group()
@click.option("--database-url", default=None, help="Override BOOKGRAPH_DATABASE_URL")
@click.pass_context
def migrate(ctx: click.Context, database_url: str | None) -> None:
    """Apply or inspect Alembic migrations of the authors, books and users tables."""
    from bookgraph.database.migrations import get_alembic_config

    configure_logging()
    ctx.obj = get_alembic_config(database_url)


@migrate.command()
@click.argument("revision", default="head")
@click.pass_obj
def upgrade(config: Config, revision: str) -> None:
    """Upgrade the schema to a revision (default: head)."""
    logger.info("Upgrading database", revision=revision)
    _run_alembic("upgrade", command.upgrade, config, revision)
    click.echo(f"✓ Upgraded to {revision}")


@migrate.command()
@click.argument("revision", default="-1")
@click.pass_obj
def downgrade(config: Config, revision: str) -> None:
    """Downgrade the schema to a revision (default: -1)."""
    logger.info("Downgrading database", revision=revision)
    _run_alembic("downgrade", command.downgrade, config, revision)
    click.echo(f"✓ Downgraded to {revision}")


@migrate.command()
@click.pass_obj
def current(config: Config) -> None:
    """Show the revision the database is at."""
    _run_alembic("current", command.current, config)


@migrate.command()
@click.pass_obj
def history(config: Config) -> None:
    """List the available revisions."""
    _run_alembic("history", command.history, config)


def _run_alembic(name: str, fn: Callable[..., None], config: Config, *args: str) -> None:
    try:
        fn(config, *args)
    except Exception as e:
        logger.error("Migration command failed", command=name, error=str(e))
        click.echo(f"✗ {name} failed: {e}", err=True)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
