"""Deploy and release API routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from aura.domain.release.command.deploy import DeployApp, DeployAppHandler
from aura.domain.release.query.get_release import (
    GetRelease,
    GetReleaseHandler,
    ReleaseDetail,
)
from aura.domain.release.query.list_releases import ListReleases, ListReleasesHandler

router = APIRouter(prefix="/apps/{app_id}", tags=["releases"], route_class=DishkaRoute)


class DeployRequest(BaseModel):
    image: str


@router.post("/deploys", status_code=201)
async def deploy(
    app_id: str,
    body: DeployRequest,
    handler: FromDishka[DeployAppHandler],
) -> ReleaseDetail:
    """Resolve the image, read its Procfile and record the next release."""
    result = await handler.run(DeployApp(app_id=app_id, image=body.image))
    return result.release


@router.get("/releases")
async def list_releases(
    app_id: str,
    handler: FromDishka[ListReleasesHandler],
) -> list[ReleaseDetail]:
    result = await handler.run(ListReleases(app_id=app_id))
    return result.items


@router.get("/releases/{version}")
async def get_release(
    app_id: str,
    version: int,
    handler: FromDishka[GetReleaseHandler],
) -> ReleaseDetail:
    return await handler.run(GetRelease(app_id=app_id, version=version))
