from typing import Any

from aura.domain.app.model.aggregate import App


def row_to_app(row: dict[str, Any]) -> App:
    return App(
        id=row["id"],
        name=row["name"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def app_to_dict(app: App) -> dict[str, Any]:
    return {
        "id": app.id,
        "name": app.name,
        "created_at": app.created_at,
        "deleted_at": app.deleted_at,
    }
