from datetime import datetime

from aura.domain.app.service.app import AppService
from aura.domain.release.model.aggregate import Release
from aura.domain.release.service.orchestrator import DeploymentOrchestrator
from aura.domain.shared.query import Query, QueryHandler, Result


class GetRelease(Query):
    app_id: str
    version: int


class ReleaseDetail(Result):
    id: str
    app_id: str
    image: str
    version: int
    procfile: str
    created_at: datetime

    @classmethod
    def from_release(cls, release: Release) -> "ReleaseDetail":
        return cls(
            id=release.id,
            app_id=release.app_id,
            image=str(release.image),
            version=release.version,
            procfile=release.manifest.decode("utf-8", errors="replace"),
            created_at=release.created_at,
        )


class GetReleaseHandler(QueryHandler[GetRelease, ReleaseDetail]):
    app_service: AppService
    orchestrator: DeploymentOrchestrator

    async def run(self, query: GetRelease) -> ReleaseDetail:
        app = await self.app_service.get(query.app_id)
        release = await self.orchestrator.get_release(app, query.version)
        return ReleaseDetail.from_release(release)
