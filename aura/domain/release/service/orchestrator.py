import logfire

from aura.domain.app.model.aggregate import App
from aura.domain.app.service.app import validate_app
from aura.domain.image.model.reference import ImageReference
from aura.domain.release.model.aggregate import PROCFILE, Release, ReleaseDraft
from aura.domain.release.port.registry import Registry
from aura.domain.release.port.repository import ReleaseRepository
from aura.domain.shared.error import AuraError, NotFoundError
from aura.domain.shared.service import Service


class DeploymentOrchestrator(Service):
    """Turns an image reference into a stored, versioned release.

    Steps run strictly in order: resolve the image, extract its Procfile,
    store the release. Any failure aborts the deploy; nothing is persisted
    unless the final store succeeds.
    """

    registry: Registry
    release_repo: ReleaseRepository

    async def deploy(self, app: App | None, image: ImageReference) -> Release:
        app = validate_app(app)

        with logfire.span("Deploy", app_id=app.id, image=str(image)):
            try:
                pinned = await self.registry.resolve(image)
            except AuraError as e:
                raise e.wrap("could not resolve image") from e

            try:
                manifest = await self.registry.extract_file(str(pinned), PROCFILE)
            except AuraError as e:
                raise e.wrap("could not extract procfile") from e

            try:
                release = await self.release_repo.create(
                    ReleaseDraft(app_id=app.id, image=pinned, manifest=manifest)
                )
            except AuraError as e:
                raise e.wrap("could not create release") from e

            logfire.info(
                "Release created",
                app_id=app.id,
                version=release.version,
                image=str(release.image),
            )
            # TODO: hand the release to a deployment executor once one exists
            return release

    async def get_release(self, app: App | None, version: int) -> Release:
        app = validate_app(app)
        release = await self.release_repo.get(app.id, version)
        if release is None:
            raise NotFoundError(f"Release not found: {app.id} v{version}")
        return release

    async def list_releases(self, app: App | None) -> list[Release]:
        app = validate_app(app)
        return await self.release_repo.list_for_app(app.id)
