"""Database engine and session factory creation."""

import os
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from aura.config import DatabaseConfig
from aura.domain.shared.error import ConfigurationError


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith(":"))


def _expand_sqlite_path(url: str) -> str:
    """Expand ~ in SQLite URLs and ensure parent directory exists."""
    if not url.startswith("sqlite") or _is_memory_sqlite(url):
        return url

    # Extract path from URL (sqlite+aiosqlite:///path or sqlite:///path)
    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]

    abs_path = os.path.abspath(os.path.expanduser(path))
    Path(abs_path).parent.mkdir(parents=True, exist_ok=True)

    return f"{prefix}{abs_path}"


def _serialize_sqlite_writers(engine: AsyncEngine) -> None:
    """Make every SQLite transaction take the write lock up front.

    SQLite ignores SELECT ... FOR UPDATE, so BEGIN IMMEDIATE is what keeps
    release version assignment serialized per database file.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create async database engine.

    Handles SQLite and PostgreSQL with appropriate settings.
    """
    if not config.url.startswith(("sqlite", "postgresql")):
        raise ConfigurationError(f"unsupported database url: {config.url}")
    url = _expand_sqlite_path(config.url)

    if _is_memory_sqlite(url):
        # One shared connection, otherwise each connection sees its own empty database
        engine_kwargs: dict[str, Any] = {
            "echo": config.echo,
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    elif url.startswith("sqlite"):
        engine_kwargs = {
            "echo": config.echo,
            "poolclass": NullPool,
            "connect_args": {"check_same_thread": False, "timeout": 30},
        }
    else:
        # PostgreSQL settings
        engine_kwargs = {
            "echo": config.echo,
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
        }

    engine = create_async_engine(url, **engine_kwargs)
    if url.startswith("sqlite") and not _is_memory_sqlite(url):
        _serialize_sqlite_writers(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory for dependency injection."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
