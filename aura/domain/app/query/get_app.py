from datetime import datetime

from aura.domain.app.model.aggregate import App
from aura.domain.app.service.app import AppService
from aura.domain.shared.query import Query, QueryHandler, Result


class GetApp(Query):
    app_id: str


class AppDetail(Result):
    id: str
    name: str
    created_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_app(cls, app: App) -> "AppDetail":
        return cls(
            id=app.id,
            name=app.name,
            created_at=app.created_at,
            deleted_at=app.deleted_at,
        )


class GetAppHandler(QueryHandler[GetApp, AppDetail]):
    app_service: AppService

    async def run(self, query: GetApp) -> AppDetail:
        app = await self.app_service.get(query.app_id)
        return AppDetail.from_app(app)
