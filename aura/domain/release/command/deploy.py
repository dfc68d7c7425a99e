from aura.domain.app.service.app import AppService
from aura.domain.image.model.reference import ImageReference
from aura.domain.release.query.get_release import ReleaseDetail
from aura.domain.release.service.orchestrator import DeploymentOrchestrator
from aura.domain.shared.command import Command, CommandHandler, Result


class DeployApp(Command):
    app_id: str
    image: str


class AppDeployed(Result):
    release: ReleaseDetail


class DeployAppHandler(CommandHandler[DeployApp, AppDeployed]):
    app_service: AppService
    orchestrator: DeploymentOrchestrator

    async def run(self, cmd: DeployApp) -> AppDeployed:
        # Malformed references fail before any lookup.
        image = ImageReference.parse(cmd.image)
        app = await self.app_service.get(cmd.app_id)
        release = await self.orchestrator.deploy(app, image)
        return AppDeployed(release=ReleaseDetail.from_release(release))
