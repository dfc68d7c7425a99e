"""Run the HTTP server in the foreground."""

import sys

import uvicorn
from alembic.util import CommandError
from sqlalchemy.exc import SQLAlchemyError

from aura.cli.console import get_console
from aura.config import Config
from aura.infrastructure.persistence.migrate import run_migrations


def serve(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Start the Aura API server.

    Args:
        host: Host to bind to.
        port: Port to listen on.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]

    if config.database.auto_migrate:
        console.print("Running database migrations...")
        try:
            run_migrations(config.database.url)
        except (CommandError, SQLAlchemyError) as e:
            console.error(f"Migration failed: {e}")
            sys.exit(1)

    console.success(f"Serving on http://{host}:{port}")
    uvicorn.run(
        "aura.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        access_log=True,
    )
