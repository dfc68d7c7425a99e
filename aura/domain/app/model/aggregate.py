"""App aggregate - a named application that releases are deployed to."""

from datetime import datetime

from aura.domain.shared.model.aggregate import Aggregate

AppId = str


class App(Aggregate):
    id: AppId
    name: str
    created_at: datetime
    deleted_at: datetime | None = None  # tombstone; set once, never cleared

    @property
    def is_live(self) -> bool:
        return self.deleted_at is None

    def mark_deleted(self, at: datetime) -> None:
        if self.deleted_at is None:
            self.deleted_at = at
