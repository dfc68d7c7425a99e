"""Apps API routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from aura.domain.app.command.create import CreateApp, CreateAppHandler
from aura.domain.app.command.destroy import DestroyApp, DestroyAppHandler
from aura.domain.app.query.get_app import AppDetail, GetApp, GetAppHandler
from aura.domain.app.query.list_apps import ListApps, ListAppsHandler

router = APIRouter(prefix="/apps", tags=["apps"], route_class=DishkaRoute)


class CreateAppRequest(BaseModel):
    name: str


@router.get("")
async def list_apps(
    handler: FromDishka[ListAppsHandler],
    name: str | None = None,
) -> list[AppDetail]:
    result = await handler.run(ListApps(name=name))
    return result.items


@router.post("", status_code=201)
async def create_app(
    body: CreateAppRequest,
    create: FromDishka[CreateAppHandler],
    get: FromDishka[GetAppHandler],
) -> AppDetail:
    created = await create.run(CreateApp(name=body.name))
    return await get.run(GetApp(app_id=created.id))


@router.get("/{app_id}")
async def get_app(app_id: str, handler: FromDishka[GetAppHandler]) -> AppDetail:
    return await handler.run(GetApp(app_id=app_id))


@router.delete("/{app_id}", status_code=204)
async def destroy_app(app_id: str, handler: FromDishka[DestroyAppHandler]) -> Response:
    await handler.run(DestroyApp(app_id=app_id))
    return Response(status_code=204)
