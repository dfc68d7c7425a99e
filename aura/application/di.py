from dishka import AsyncContainer, make_async_container

from aura.config import Config
from aura.domain.app.util.di import AppProvider
from aura.domain.release.util.di import ReleaseProvider
from aura.infrastructure.oci import OciProvider
from aura.infrastructure.persistence import PersistenceProvider
from aura.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        OciProvider(),
        AppProvider(),
        ReleaseProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
