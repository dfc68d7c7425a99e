import logfire

from aura.domain.app.service.app import AppService
from aura.domain.shared.command import Command, CommandHandler, Result


class DestroyApp(Command):
    app_id: str


class AppDestroyed(Result):
    pass


class DestroyAppHandler(CommandHandler[DestroyApp, AppDestroyed]):
    app_service: AppService

    async def run(self, cmd: DestroyApp) -> AppDestroyed:
        with logfire.span("DestroyApp", app_id=cmd.app_id):
            app = await self.app_service.get(cmd.app_id)
            await self.app_service.destroy(app)
            return AppDestroyed()
