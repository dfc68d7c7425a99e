import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import NullPool, StaticPool

from aura.config import DatabaseConfig
from aura.domain.shared.error import ConfigurationError
from aura.infrastructure.persistence.database import create_db_engine
from aura.infrastructure.persistence.migrate import run_migrations


class TestCreateDbEngine:
    @pytest.mark.asyncio
    async def test_memory_sqlite_shares_one_connection(self):
        engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
        assert isinstance(engine.pool, StaticPool)
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_file_sqlite_creates_parent_dir(self, tmp_path):
        db_path = tmp_path / "nested" / "aura.db"
        engine = create_db_engine(DatabaseConfig(url=f"sqlite+aiosqlite:///{db_path}"))

        assert db_path.parent.is_dir()
        assert isinstance(engine.pool, NullPool)
        await engine.dispose()

    def test_unsupported_url(self):
        with pytest.raises(ConfigurationError):
            create_db_engine(DatabaseConfig(url="mysql+aiomysql://localhost/aura"))


class TestMigrations:
    def test_upgrade_creates_tables(self, tmp_path):
        db_path = tmp_path / "aura.db"

        run_migrations(f"sqlite+aiosqlite:///{db_path}")

        engine = create_engine(f"sqlite:///{db_path}")
        try:
            inspector = inspect(engine)
            assert {"apps", "releases", "alembic_version"} <= set(inspector.get_table_names())
            uniques = inspector.get_unique_constraints("releases")
            assert any(set(u["column_names"]) == {"app_id", "version"} for u in uniques)
        finally:
            engine.dispose()
