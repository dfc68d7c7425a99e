"""HTTP API tests against a migrated SQLite database and a fake registry."""

import pytest
from dishka import make_async_container, provide
from fastapi.testclient import TestClient

from aura.application.api.rest.app import create_app
from aura.config import Config, DatabaseConfig
from aura.domain.app.util.di import AppProvider
from aura.domain.image.model.reference import ImageReference
from aura.domain.release.port.registry import Registry
from aura.domain.release.util.di import ReleaseProvider
from aura.domain.shared.error import AuraError, TransientIOError
from aura.infrastructure.persistence import PersistenceProvider
from aura.infrastructure.persistence.migrate import run_migrations
from aura.util.di.base import Provider
from aura.util.di.scope import Scope


class FakeRegistry(Registry):
    def __init__(self) -> None:
        self.procfile = b"web: ./server\nworker: ./worker\n"
        self.error: AuraError | None = None

    async def resolve(self, ref: ImageReference) -> ImageReference:
        if self.error is not None:
            raise self.error
        if ref.is_pinned:
            return ref
        return ImageReference(registry=ref.registry, repository=ref.repository, digest="sha256:feed")

    async def extract_file(self, image: str, file_name: str) -> bytes:
        return self.procfile


class FakeOciProvider(Provider):
    def __init__(self, registry: Registry) -> None:
        super().__init__()
        self._registry = registry

    @provide(scope=Scope.APP)
    def get_registry(self) -> Registry:
        return self._registry


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def client(sqlite_url: str, registry: FakeRegistry):
    run_migrations(sqlite_url)
    config = Config(database=DatabaseConfig(url=sqlite_url, auto_migrate=False))
    container = make_async_container(
        PersistenceProvider(),
        FakeOciProvider(registry),
        AppProvider(),
        ReleaseProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]
    )
    with TestClient(create_app(config, container)) as client:
        yield client


def _create_app(client: TestClient, name: str = "web") -> dict:
    response = client.post("/apps", json={"name": name})
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_healthz(self, client: TestClient):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readyz(self, client: TestClient):
        assert client.get("/readyz").status_code == 200


class TestApps:
    def test_create_and_get(self, client: TestClient):
        created = _create_app(client)

        response = client.get(f"/apps/{created['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "web"

    def test_list(self, client: TestClient):
        _create_app(client, "worker")
        _create_app(client, "api")

        names = [a["name"] for a in client.get("/apps").json()]

        assert names == ["api", "worker"]

    def test_list_by_name(self, client: TestClient):
        _create_app(client, "api")
        assert client.get("/apps", params={"name": "ghost"}).json() == []

    def test_blank_name(self, client: TestClient):
        response = client.post("/apps", json={"name": "  "})

        assert response.status_code == 422
        assert response.json()["field"] == "name"

    def test_unknown_app(self, client: TestClient):
        response = client.get("/apps/nope")

        assert response.status_code == 404
        assert response.json()["code"] == "NotFoundError"

    def test_destroy(self, client: TestClient):
        created = _create_app(client)

        assert client.delete(f"/apps/{created['id']}").status_code == 204
        assert client.get(f"/apps/{created['id']}").status_code == 404
        assert client.get("/apps").json() == []


class TestDeploys:
    def test_deploy_creates_pinned_release(self, client: TestClient):
        app = _create_app(client)

        response = client.post(f"/apps/{app['id']}/deploys", json={"image": "nginx:1.25"})

        assert response.status_code == 201
        body = response.json()
        assert body["version"] == 1
        assert body["app_id"] == app["id"]
        assert body["image"] == "nginx@sha256:feed"
        assert body["procfile"] == "web: ./server\nworker: ./worker\n"

    def test_releases_are_listed_in_version_order(self, client: TestClient):
        app = _create_app(client)
        for _ in range(3):
            client.post(f"/apps/{app['id']}/deploys", json={"image": "nginx:1.25"})

        releases = client.get(f"/apps/{app['id']}/releases").json()

        assert [r["version"] for r in releases] == [1, 2, 3]

    def test_get_release(self, client: TestClient):
        app = _create_app(client)
        client.post(f"/apps/{app['id']}/deploys", json={"image": "nginx@sha256:abc"})

        response = client.get(f"/apps/{app['id']}/releases/1")

        assert response.status_code == 200
        assert response.json()["image"] == "nginx@sha256:abc"
        assert client.get(f"/apps/{app['id']}/releases/2").status_code == 404

    def test_malformed_image(self, client: TestClient):
        app = _create_app(client)

        response = client.post(f"/apps/{app['id']}/deploys", json={"image": ":latest"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FORMAT"

    def test_unknown_app(self, client: TestClient):
        response = client.post("/apps/nope/deploys", json={"image": "nginx"})
        assert response.status_code == 404

    def test_registry_failure(self, client: TestClient, registry: FakeRegistry):
        app = _create_app(client)
        registry.error = TransientIOError("pulling image nginx: timeout")

        response = client.post(f"/apps/{app['id']}/deploys", json={"image": "nginx"})

        assert response.status_code == 503
        assert response.json()["message"].startswith("could not resolve image: ")
        assert client.get(f"/apps/{app['id']}/releases").json() == []
