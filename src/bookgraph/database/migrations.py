"""
Alembic configuration for the bookgraph schema
"""

import sys
from pathlib import Path

from alembic.config import Config

# src/bookgraph/database/migrations.py -> project root
PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config(database_url: str | None = None) -> Config:
    """Build the Alembic config from the project's alembic.ini.

    ``database_url`` overrides ``BOOKGRAPH_DATABASE_URL`` for this run only.
    Logging is left to bookgraph's own structlog setup.
    """
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    # Alembic's default stdout is bound at import time
    config = Config(str(alembic_ini), stdout=sys.stdout)
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    if database_url:
        # ConfigParser interpolation treats % specially
        config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    config.attributes["configure_logger"] = False
    return config
