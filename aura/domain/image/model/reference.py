"""Container image references.

Grammar: ``[registry/]repository[:tag|@digest]``

    >>> ImageReference.parse("ghcr.io/foo/bar:latest")
    ImageReference(registry='ghcr.io', repository='foo/bar', tag='latest', digest=None)

A colon whose suffix contains a slash is part of the repository rather than a
tag separator, so ``foo/bar:baz/bat`` parses to registry ``foo`` and repository
``bar:baz/bat``.
"""

from typing import Any

from pydantic import model_serializer, model_validator
from typing_extensions import Self

from aura.domain.shared.error import InvalidFormatError
from aura.domain.shared.model.value import ValueObject


class ImageReference(ValueObject):
    registry: str | None = None
    repository: str
    tag: str | None = None
    digest: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split(data)
        return data

    @model_validator(mode="after")
    def _check(self) -> Self:
        if not self.repository:
            raise ValueError("repository is required")
        if self.tag is not None and self.digest is not None:
            raise ValueError("tag and digest are mutually exclusive")
        return self

    @model_serializer
    def _to_text(self) -> str:
        return str(self)

    @classmethod
    def parse(cls, text: str) -> "ImageReference":
        """Parse a textual image reference.

        Raises:
            InvalidFormatError: If the reference has no repository.
        """
        parts = _split(text)
        if not parts["repository"]:
            raise InvalidFormatError(f"invalid image format: {text!r}")
        return cls(**parts)

    @property
    def name(self) -> str:
        """Registry and repository without tag or digest."""
        if self.registry:
            return f"{self.registry}/{self.repository}"
        return self.repository

    @property
    def is_pinned(self) -> bool:
        return self.digest is not None

    def __str__(self) -> str:
        if self.digest:
            return f"{self.name}@{self.digest}"
        if self.tag:
            return f"{self.name}:{self.tag}"
        return self.name


def _split(text: str) -> dict[str, str | None]:
    repo_part, tag, digest = _split_tag(text)
    registry, repository = _split_registry(repo_part)
    return {
        "registry": registry or None,
        "repository": repository,
        "tag": tag or None,
        "digest": digest or None,
    }


def _split_tag(text: str) -> tuple[str, str | None, str | None]:
    if "@" in text:
        repo_part, digest = text.split("@", 1)
        return repo_part, None, digest

    repo_part, sep, tag = text.rpartition(":")
    if sep and "/" not in tag:
        return repo_part, tag, None
    return text, None, None


def _split_registry(repo_part: str) -> tuple[str | None, str]:
    segments = repo_part.split("/")
    if len(segments) <= 2:
        return None, repo_part
    return segments[0], "/".join(segments[1:])
