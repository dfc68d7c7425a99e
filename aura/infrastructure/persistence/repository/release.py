"""SQLAlchemy adapter implementing ReleaseRepository."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from aura.domain.app.model.aggregate import AppId
from aura.domain.release.model.aggregate import Release, ReleaseDraft
from aura.domain.release.port.repository import ReleaseRepository
from aura.domain.shared.error import NotFoundError, StorageError
from aura.infrastructure.persistence.mappers.release import release_to_dict, row_to_release
from aura.infrastructure.persistence.tables import apps_table, releases_table

logger = logging.getLogger(__name__)


class SQLAlchemyReleaseRepository(ReleaseRepository):
    """SQLAlchemy-backed release store.

    Releases are append-only. `create` owns its transaction: it locks the app
    row and the app's existing release rows, reads the current maximum
    version, inserts the next one and commits. A second create for the same
    app blocks on the app row lock until the first commits or rolls back,
    including when the app has no releases yet.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, draft: ReleaseDraft) -> Release:
        try:
            if not self.session.in_transaction():
                await self.session.begin()

            await self._lock(draft.app_id)
            current = await self._current_version(draft.app_id)

            release = Release(
                id=str(uuid4()),
                app_id=draft.app_id,
                image=draft.image,
                version=current + 1,
                manifest=draft.manifest,
                created_at=datetime.now(UTC),
            )
            await self._insert(release)
            await self._commit()
        except BaseException:
            await self._rollback()
            raise

        logger.debug("Stored release %s v%d", release.app_id, release.version)
        return release

    async def get(self, app_id: AppId, version: int) -> Release | None:
        stmt = select(releases_table).where(
            releases_table.c.app_id == app_id,
            releases_table.c.version == version,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_release(dict(row)) if row else None

    async def list_for_app(self, app_id: AppId) -> list[Release]:
        stmt = (
            select(releases_table)
            .where(releases_table.c.app_id == app_id)
            .order_by(releases_table.c.version.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_release(dict(r)) for r in result.mappings().all()]

    async def _lock(self, app_id: AppId) -> None:
        """Write-lock the app row, then the app's existing release rows."""
        app_stmt = select(apps_table.c.id).where(apps_table.c.id == app_id).with_for_update()
        releases_stmt = (
            select(releases_table.c.id)
            .where(releases_table.c.app_id == app_id)
            .with_for_update()
        )
        try:
            app_row = (await self.session.execute(app_stmt)).first()
            if app_row is not None:
                await self.session.execute(releases_stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"locking releases for app {app_id}: {e}") from e

        if app_row is None:
            raise NotFoundError(f"App not found: {app_id}")

    async def _current_version(self, app_id: AppId) -> int:
        stmt = select(func.max(releases_table.c.version)).where(
            releases_table.c.app_id == app_id
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"getting latest release version: {e}") from e
        # No releases yet means the first one gets version 1
        return result.scalar() or 0

    async def _insert(self, release: Release) -> None:
        stmt = insert(releases_table).values(**release_to_dict(release))
        try:
            await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"creating release: {e}") from e

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"committing release: {e}") from e

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError:
            logger.exception("Rolling back release transaction failed")
