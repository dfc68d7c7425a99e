from abc import abstractmethod
from typing import Protocol

from aura.domain.app.model.aggregate import App, AppId
from aura.domain.shared.port import Port


class AppRepository(Port, Protocol):
    """Storage for apps. Every lookup only sees live (not soft-deleted) apps."""

    @abstractmethod
    async def get(self, app_id: AppId) -> App | None: ...

    @abstractmethod
    async def find_by_name(self, name: str) -> App | None: ...

    @abstractmethod
    async def list(self) -> list[App]: ...

    @abstractmethod
    async def save(self, app: App) -> None: ...
