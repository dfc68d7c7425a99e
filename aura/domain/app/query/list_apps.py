from aura.domain.app.query.get_app import AppDetail
from aura.domain.app.service.app import AppService
from aura.domain.shared.error import NotFoundError
from aura.domain.shared.query import Query, QueryHandler, Result


class ListApps(Query):
    name: str | None = None


class AppList(Result):
    items: list[AppDetail]
    total: int


class ListAppsHandler(QueryHandler[ListApps, AppList]):
    app_service: AppService

    async def run(self, query: ListApps) -> AppList:
        if query.name:
            try:
                apps = [await self.app_service.find_by_name(query.name)]
            except NotFoundError:
                apps = []
        else:
            apps = await self.app_service.list()
        items = [AppDetail.from_app(app) for app in apps]
        return AppList(items=items, total=len(items))
