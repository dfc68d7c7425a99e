from aura.domain.app.service.app import AppService
from aura.domain.shared.command import Command, CommandHandler, Result


class CreateApp(Command):
    name: str


class AppCreated(Result):
    id: str
    name: str


class CreateAppHandler(CommandHandler[CreateApp, AppCreated]):
    app_service: AppService

    async def run(self, cmd: CreateApp) -> AppCreated:
        app = await self.app_service.create(cmd.name)
        return AppCreated(id=app.id, name=app.name)
