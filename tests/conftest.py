"""Global test fixtures."""

import logfire
import pytest
import pytest_asyncio

from aura.config import DatabaseConfig
from aura.infrastructure.persistence.database import create_db_engine, create_session_factory
from aura.infrastructure.persistence.tables import metadata

# Spans and events stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'aura.db'}"


@pytest_asyncio.fixture
async def engine(sqlite_url: str):
    """File-backed SQLite engine with all tables created."""
    engine = create_db_engine(DatabaseConfig(url=sqlite_url))
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
