"""Tests for SQLAlchemyAppRepository against file-backed SQLite."""

from datetime import UTC, datetime

import pytest

from aura.domain.app.model.aggregate import App
from aura.infrastructure.persistence.repository.app import SQLAlchemyAppRepository


def _make_app(app_id: str, name: str) -> App:
    return App(id=app_id, name=name, created_at=datetime.now(UTC))


class TestAppRepository:
    @pytest.mark.asyncio
    async def test_save_and_get(self, session):
        repo = SQLAlchemyAppRepository(session)
        await repo.save(_make_app("a1", "web"))

        found = await repo.get("a1")

        assert found is not None
        assert found.name == "web"
        assert found.is_live

    @pytest.mark.asyncio
    async def test_get_missing(self, session):
        assert await SQLAlchemyAppRepository(session).get("nope") is None

    @pytest.mark.asyncio
    async def test_find_by_name(self, session):
        repo = SQLAlchemyAppRepository(session)
        await repo.save(_make_app("a1", "web"))
        await repo.save(_make_app("a2", "worker"))

        found = await repo.find_by_name("worker")

        assert found is not None
        assert found.id == "a2"

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_name(self, session):
        repo = SQLAlchemyAppRepository(session)
        await repo.save(_make_app("a1", "zeta"))
        await repo.save(_make_app("a2", "alpha"))

        assert [a.name for a in await repo.list()] == ["alpha", "zeta"]

    @pytest.mark.asyncio
    async def test_soft_deleted_apps_are_hidden(self, session):
        repo = SQLAlchemyAppRepository(session)
        app = _make_app("a1", "web")
        await repo.save(app)

        app.mark_deleted(datetime.now(UTC))
        await repo.save(app)

        assert await repo.get("a1") is None
        assert await repo.find_by_name("web") is None
        assert await repo.list() == []
