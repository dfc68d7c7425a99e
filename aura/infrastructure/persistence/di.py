from typing import AsyncIterable

from dishka import from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from aura.config import Config
from aura.domain.app.port.repository import AppRepository
from aura.domain.release.port.repository import ReleaseRepository
from aura.infrastructure.persistence.database import create_db_engine, create_session_factory
from aura.infrastructure.persistence.repository.app import SQLAlchemyAppRepository
from aura.infrastructure.persistence.repository.release import SQLAlchemyReleaseRepository
from aura.util.di.base import Provider
from aura.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # One session per unit of work, committed when the request succeeds
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    app_repo = provide(SQLAlchemyAppRepository, scope=Scope.UOW, provides=AppRepository)
    release_repo = provide(
        SQLAlchemyReleaseRepository, scope=Scope.UOW, provides=ReleaseRepository
    )
