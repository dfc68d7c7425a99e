"""Database migration command."""

import sys

from alembic.util import CommandError
from sqlalchemy.exc import SQLAlchemyError

from aura.cli.console import get_console
from aura.config import Config
from aura.infrastructure.persistence.migrate import run_migrations


def migrate(revision: str = "head") -> None:
    """Upgrade the database schema.

    Args:
        revision: Alembic revision to upgrade to.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]

    try:
        run_migrations(config.database.url, revision)
    except (CommandError, SQLAlchemyError) as e:
        console.error(f"Migration failed: {e}", hint="Check AURA_DATABASE__URL")
        sys.exit(1)

    console.success(f"Database at {revision}")
