from __future__ import annotations

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from aura.domain.app.model.aggregate import App, AppId
from aura.domain.app.port.repository import AppRepository
from aura.infrastructure.persistence.mappers.app import app_to_dict, row_to_app
from aura.infrastructure.persistence.tables import apps_table


def _live():
    """Predicate applied to every default app query."""
    return apps_table.c.deleted_at.is_(None)


class SQLAlchemyAppRepository(AppRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, app_id: AppId) -> App | None:
        stmt = select(apps_table).where(apps_table.c.id == app_id, _live())
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_app(dict(row)) if row else None

    async def find_by_name(self, name: str) -> App | None:
        stmt = (
            select(apps_table)
            .where(apps_table.c.name == name, _live())
            .order_by(apps_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_app(dict(row)) if row else None

    async def save(self, app: App) -> None:
        app_dict = app_to_dict(app)

        # Existence check ignores the tombstone so deletes update in place
        stmt = select(apps_table.c.id).where(apps_table.c.id == app.id)
        result = await self.session.execute(stmt)

        if result.first() is not None:
            stmt = update(apps_table).where(apps_table.c.id == app.id).values(**app_dict)
        else:
            stmt = insert(apps_table).values(**app_dict)

        await self.session.execute(stmt)
        await self.session.flush()

    async def list(self) -> list[App]:
        stmt = select(apps_table).where(_live()).order_by(apps_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_app(dict(r)) for r in result.mappings().all()]
