from datetime import UTC, datetime
from uuid import uuid4

import logfire

from aura.domain.app.model.aggregate import App, AppId
from aura.domain.app.port.repository import AppRepository
from aura.domain.shared.error import NotFoundError, ValidationError
from aura.domain.shared.service import Service

MAX_NAME_LENGTH = 50


def validate_app(app: App | None) -> App:
    """Require a persisted app reference before anything touches I/O."""
    if app is None:
        raise ValidationError("an application is required", field="app")
    if not app.id:
        raise ValidationError("the application is invalid", field="app")
    return app


class AppService(Service):
    app_repo: AppRepository

    async def create(self, name: str) -> App:
        name = name.strip()
        if not name:
            raise ValidationError("app name is required", field="name")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"app name must be at most {MAX_NAME_LENGTH} characters", field="name"
            )

        app = App(id=str(uuid4()), name=name, created_at=datetime.now(UTC))
        await self.app_repo.save(app)
        logfire.info("App created", app_id=app.id, name=app.name)
        return app

    async def get(self, app_id: AppId) -> App:
        app = await self.app_repo.get(app_id)
        if app is None:
            raise NotFoundError(f"App not found: {app_id}")
        return app

    async def find_by_name(self, name: str) -> App:
        app = await self.app_repo.find_by_name(name)
        if app is None:
            raise NotFoundError(f"App not found: {name}")
        return app

    async def list(self) -> list[App]:
        return await self.app_repo.list()

    async def destroy(self, app: App | None) -> None:
        app = validate_app(app)
        app.mark_deleted(datetime.now(UTC))
        await self.app_repo.save(app)
        logfire.info("App destroyed", app_id=app.id)
