from typing import AsyncIterable

import aiodocker
from dishka import provide

from aura.config import Config
from aura.domain.release.port.registry import Registry
from aura.infrastructure.oci.registry import DockerRegistry
from aura.util.di.base import Provider
from aura.util.di.scope import Scope


class OciProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_docker(self, config: Config) -> AsyncIterable[aiodocker.Docker]:
        docker = aiodocker.Docker(url=config.docker.url)
        yield docker
        await docker.close()

    @provide(scope=Scope.APP)
    def get_registry(self, docker: aiodocker.Docker) -> Registry:
        return DockerRegistry(docker)
