"""Version assignment under real row locks (PostgreSQL only)."""

import asyncio
from datetime import UTC, datetime

import pytest

from aura.domain.app.model.aggregate import App
from aura.domain.image.model.reference import ImageReference
from aura.domain.release.model.aggregate import ReleaseDraft
from aura.infrastructure.persistence.repository.app import SQLAlchemyAppRepository
from aura.infrastructure.persistence.repository.release import SQLAlchemyReleaseRepository


async def _create_app(session_factory, app_id: str) -> None:
    async with session_factory() as session:
        await SQLAlchemyAppRepository(session).save(
            App(id=app_id, name=app_id, created_at=datetime.now(UTC))
        )
        await session.commit()


@pytest.mark.asyncio
async def test_concurrent_first_releases(pg_session_factory):
    await _create_app(pg_session_factory, "app-1")
    draft = ReleaseDraft(
        app_id="app-1",
        image=ImageReference.parse("ghcr.io/acme/web@sha256:abc"),
        manifest=b"web: ./server\n",
    )

    async def create_one():
        async with pg_session_factory() as session:
            return await SQLAlchemyReleaseRepository(session).create(draft)

    releases = await asyncio.gather(*(create_one() for _ in range(10)))

    assert sorted(r.version for r in releases) == list(range(1, 11))


@pytest.mark.asyncio
async def test_apps_do_not_block_each_other(pg_session_factory):
    await _create_app(pg_session_factory, "a")
    await _create_app(pg_session_factory, "b")
    image = ImageReference.parse("acme/web@sha256:abc")

    async def create_for(app_id: str):
        async with pg_session_factory() as session:
            return await SQLAlchemyReleaseRepository(session).create(
                ReleaseDraft(app_id=app_id, image=image, manifest=b"")
            )

    a, b = await asyncio.gather(create_for("a"), create_for("b"))

    assert (a.version, b.version) == (1, 1)
