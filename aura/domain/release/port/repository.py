from abc import abstractmethod
from typing import Protocol

from aura.domain.app.model.aggregate import AppId
from aura.domain.release.model.aggregate import Release, ReleaseDraft
from aura.domain.shared.port import Port


class ReleaseRepository(Port, Protocol):
    @abstractmethod
    async def create(self, draft: ReleaseDraft) -> Release:
        """Store a release under the next version number for its app.

        Concurrent calls for the same app never produce duplicate or
        missing versions.
        """
        ...

    @abstractmethod
    async def get(self, app_id: AppId, version: int) -> Release | None: ...

    @abstractmethod
    async def list_for_app(self, app_id: AppId) -> list[Release]: ...
