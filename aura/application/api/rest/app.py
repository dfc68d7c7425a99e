import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from aura.application.api.errors import map_aura_error
from aura.application.api.rest.routes import apps, health, releases
from aura.application.di import create_container
from aura.config import Config, configure_logging
from aura.domain.shared.error import AuraError
from aura.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    A prebuilt container replaces the default one, which is how tests swap
    in fake providers.
    """
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting Aura server: %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    logfire.instrument_fastapi(app_instance)

    setup_dishka(container or create_container(config), app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(apps.router)
    app_instance.include_router(releases.router)

    @app_instance.exception_handler(AuraError)
    async def aura_error_handler(request: Request, exc: AuraError):
        http_exc = map_aura_error(exc)
        if http_exc.status_code >= 500:
            logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)

    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app_instance
