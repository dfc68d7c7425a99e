"""Registry client using aiodocker."""

import posixpath
import tarfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiodocker
import logfire
from aiodocker.containers import DockerContainer

from aura.domain.image.model.reference import ImageReference
from aura.domain.release.port.registry import Registry
from aura.domain.shared.error import ArchiveError, TransientIOError


class DockerRegistry(Registry):
    """Resolves images and reads files from them through the Docker Engine API."""

    def __init__(self, docker: aiodocker.Docker):
        self._docker = docker

    async def resolve(self, ref: ImageReference) -> ImageReference:
        """Pull `ref` and pin it to the first digest the engine reports.

        Digest-qualified references are returned as given once pulled.
        """
        await self._pull(ref)
        if ref.is_pinned:
            return ref

        try:
            info = await self._docker.images.inspect(str(ref))
        except aiodocker.DockerError as e:
            raise TransientIOError(f"inspecting image {ref}: {e.message}") from e

        digests = info.get("RepoDigests") or []
        if not digests:
            return ref
        return ImageReference.parse(digests[0])

    async def extract_file(self, image: str, file_name: str) -> bytes:
        async with self._ephemeral_container(image) as container:
            working_dir = await self._working_dir(container)
            path = posixpath.join(working_dir, file_name) if working_dir else file_name
            archive = await self._download(container, path)
            return _read_single_entry(archive, path)

    async def _pull(self, ref: ImageReference) -> None:
        # An empty tag would make the engine pull every tag of the repository
        tag = ref.digest or ref.tag or "latest"
        logfire.info("Pulling image", image=ref.name, tag=tag)
        try:
            progress = await self._docker.images.pull(ref.name, tag=tag)
        except aiodocker.DockerError as e:
            raise TransientIOError(f"pulling image {ref}: {e.message}") from e

        for chunk in progress or []:
            if isinstance(chunk, dict) and "error" in chunk:
                raise TransientIOError(f"pulling image {ref}: {chunk['error']}")

    @asynccontextmanager
    async def _ephemeral_container(self, image: str) -> AsyncIterator[DockerContainer]:
        """Create a container that is never started and always removed."""
        try:
            container = await self._docker.containers.create({"Image": image})
        except aiodocker.DockerError as e:
            raise TransientIOError(f"creating container from {image}: {e.message}") from e

        try:
            yield container
        finally:
            await self._remove(container)

    async def _working_dir(self, container: DockerContainer) -> str:
        try:
            info = await container.show()
        except aiodocker.DockerError as e:
            raise TransientIOError(f"inspecting container: {e.message}") from e
        return (info.get("Config") or {}).get("WorkingDir") or ""

    async def _download(self, container: DockerContainer, path: str) -> tarfile.TarFile:
        try:
            return await container.get_archive(path)
        except aiodocker.DockerError as e:
            raise TransientIOError(f"downloading {path}: {e.message}") from e
        except tarfile.TarError as e:
            raise ArchiveError(f"reading tar for {path}: {e}") from e

    async def _remove(self, container: DockerContainer) -> None:
        try:
            await container.delete(force=True)
        except aiodocker.DockerError as e:
            logfire.warning("Failed to remove container", container_id=container.id, error=e.message)


def _read_single_entry(archive: tarfile.TarFile, path: str) -> bytes:
    """Return the content of the first (and only expected) archive entry."""
    with archive:
        try:
            member = archive.next()
        except tarfile.TarError as e:
            raise ArchiveError(f"reading tar for {path}: {e}") from e
        if member is None:
            raise ArchiveError(f"reading tar for {path}: archive is empty")

        content = archive.extractfile(member)
        if content is None:
            raise ArchiveError(f"reading tar for {path}: {member.name} is not a regular file")
        return content.read()
