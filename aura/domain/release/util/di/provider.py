from dishka import provide

from aura.domain.release.command.deploy import DeployAppHandler
from aura.domain.release.query.get_release import GetReleaseHandler
from aura.domain.release.query.list_releases import ListReleasesHandler
from aura.domain.release.service.orchestrator import DeploymentOrchestrator
from aura.util.di.base import Provider
from aura.util.di.scope import Scope


class ReleaseProvider(Provider):
    orchestrator = provide(DeploymentOrchestrator, scope=Scope.UOW)

    deploy_app_handler = provide(DeployAppHandler, scope=Scope.UOW)
    get_release_handler = provide(GetReleaseHandler, scope=Scope.UOW)
    list_releases_handler = provide(ListReleasesHandler, scope=Scope.UOW)
