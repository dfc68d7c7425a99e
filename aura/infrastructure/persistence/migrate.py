"""Database migration utilities.

Migrations run before the server starts accepting requests, from a plain
synchronous call that drives Alembic.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

from aura.infrastructure.persistence.database import _expand_sqlite_path

logger = logging.getLogger(__name__)

# Project root where alembic.ini lives
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


def get_alembic_config(database_url: str) -> AlembicConfig:
    """Create Alembic config pointing at the given database."""
    config = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    # env.py runs migrations on an async engine, so the driver stays as configured
    config.set_main_option("sqlalchemy.url", _expand_sqlite_path(database_url))
    return config


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database to `revision`.

    Must not be called from inside a running event loop.
    """
    command.upgrade(get_alembic_config(database_url), revision)
    logger.info("Database migrations complete (revision=%s)", revision)
