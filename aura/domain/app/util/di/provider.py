from dishka import provide

from aura.domain.app.command.create import CreateAppHandler
from aura.domain.app.command.destroy import DestroyAppHandler
from aura.domain.app.query.get_app import GetAppHandler
from aura.domain.app.query.list_apps import ListAppsHandler
from aura.domain.app.service.app import AppService
from aura.util.di.base import Provider
from aura.util.di.scope import Scope


class AppProvider(Provider):
    service = provide(AppService, scope=Scope.UOW)

    create_app_handler = provide(CreateAppHandler, scope=Scope.UOW)
    destroy_app_handler = provide(DestroyAppHandler, scope=Scope.UOW)
    get_app_handler = provide(GetAppHandler, scope=Scope.UOW)
    list_apps_handler = provide(ListAppsHandler, scope=Scope.UOW)
