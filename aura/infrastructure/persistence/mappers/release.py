from typing import Any

from aura.domain.image.model.reference import ImageReference
from aura.domain.release.model.aggregate import Release


def row_to_release(row: dict[str, Any]) -> Release:
    """Convert database row to Release aggregate.

    The image column holds the textual reference, so it is decoded here.
    """
    return Release(
        id=row["id"],
        app_id=row["app_id"],
        image=ImageReference.parse(row["image"]),
        version=row["version"],
        manifest=bytes(row["manifest"]),
        created_at=row["created_at"],
    )


def release_to_dict(release: Release) -> dict[str, Any]:
    return {
        "id": release.id,
        "app_id": release.app_id,
        "image": str(release.image),
        "version": release.version,
        "manifest": release.manifest,
        "created_at": release.created_at,
    }
