"""Release aggregate - an immutable, versioned pairing of an app and an image."""

from datetime import datetime

from pydantic import Field

from aura.domain.app.model.aggregate import AppId
from aura.domain.image.model.reference import ImageReference
from aura.domain.shared.model.aggregate import Aggregate
from aura.domain.shared.model.value import ValueObject

PROCFILE = "Procfile"


class ReleaseDraft(ValueObject):
    """A release that has not been stored yet (no id, version or timestamp)."""

    app_id: AppId
    image: ImageReference
    manifest: bytes


class Release(Aggregate):
    id: str
    app_id: AppId
    image: ImageReference  # digest-pinned when the registry reported one
    version: int = Field(ge=1)  # contiguous per app_id, starting at 1
    manifest: bytes  # raw Procfile contents
    created_at: datetime
