import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.models.places_model import Place
from app.repos.base_repo import PlaceStore
from app.repos.local_repo import LocalRepository

TEST_SECRET = "test-secret"


def make_place(i: int, lat: float = 55.75, lon: float = 37.61) -> Place:
    return Place(
        id=str(i),
        name=f"Place {i}",
        address=f"Street {i}",
        phone=f"(495) 000-00-{i:02d}",
        location={"lat": lat, "lon": lon},
    )


class SpyStore(PlaceStore):
    """Wraps a store and records every call made to it."""

    def __init__(self, inner: PlaceStore):
        self.inner = inner
        self.calls = []

    async def list_places(self, limit, offset):
        self.calls.append(("list_places", limit, offset))
        return await self.inner.list_places(limit, offset)

    async def nearest_places(self, lat, lon, limit):
        self.calls.append(("nearest_places", lat, lon, limit))
        return await self.inner.nearest_places(lat, lon, limit)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        STORAGE_MODE="local",
        JWT_SECRET_KEY=TEST_SECRET,
        DATA_FILE=str(tmp_path / "missing.csv"),
    )


@pytest.fixture
def make_client(settings):
    clients = []

    def _make(places, app_settings=None):
        store = SpyStore(LocalRepository(places))
        client = TestClient(create_app(app_settings or settings, store=store))
        client.__enter__()
        clients.append(client)
        return client, store

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def auth_header():
    def _header(client):
        token = client.get("/api/get_token").json()["token"]
        return {"Authorization": f"Bearer {token}"}
    return _header
