from aura.domain.app.service.app import AppService
from aura.domain.release.query.get_release import ReleaseDetail
from aura.domain.release.service.orchestrator import DeploymentOrchestrator
from aura.domain.shared.query import Query, QueryHandler, Result


class ListReleases(Query):
    app_id: str


class ReleaseList(Result):
    items: list[ReleaseDetail]
    total: int


class ListReleasesHandler(QueryHandler[ListReleases, ReleaseList]):
    app_service: AppService
    orchestrator: DeploymentOrchestrator

    async def run(self, query: ListReleases) -> ReleaseList:
        app = await self.app_service.get(query.app_id)
        releases = await self.orchestrator.list_releases(app)
        items = [ReleaseDetail.from_release(r) for r in releases]
        return ReleaseList(items=items, total=len(items))
