"""Fixtures for PostgreSQL integration tests."""

import os

import pytest
import pytest_asyncio

from aura.config import DatabaseConfig
from aura.infrastructure.persistence.database import create_db_engine, create_session_factory
from aura.infrastructure.persistence.tables import metadata


def _get_pg_url() -> str:
    url = os.environ.get("AURA_DATABASE__URL", "")
    if "postgresql" not in url:
        pytest.skip("AURA_DATABASE__URL not set to PostgreSQL")
    return url


@pytest_asyncio.fixture
async def pg_engine():
    engine = create_db_engine(DatabaseConfig(url=_get_pg_url()))
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def pg_session_factory(pg_engine):
    return create_session_factory(pg_engine)
