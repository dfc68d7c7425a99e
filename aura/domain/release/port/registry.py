"""Port for resolving images and reading files out of them."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from aura.domain.image.model.reference import ImageReference
from aura.domain.shared.port import Port


@runtime_checkable
class Registry(Port, Protocol):
    """Container registry/runtime used by deploys."""

    @abstractmethod
    async def resolve(self, ref: ImageReference) -> ImageReference:
        """Pull `ref` and return its digest-pinned form when one is known."""
        ...

    @abstractmethod
    async def extract_file(self, image: str, file_name: str) -> bytes:
        """Read `file_name` (relative to the image's working directory)."""
        ...
