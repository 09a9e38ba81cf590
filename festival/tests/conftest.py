import fakeredis
import pytest
from fastapi.testclient import TestClient

from festival.core.locking import RedisLock
from festival.main import app
from festival.stores.memory import FestivalStore, get_store


@pytest.fixture
def store() -> FestivalStore:
    """A fresh, empty store for each test."""
    return FestivalStore()


# Override the store dependency
@pytest.fixture
def client(store: FestivalStore):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fake_redis():
    server = fakeredis.FakeServer()
    redis_client = fakeredis.FakeStrictRedis(server=server, decode_responses=True)
    yield redis_client
    redis_client.flushall()


@pytest.fixture
def redis_store(fake_redis) -> FestivalStore:
    """A store whose lock lives in (fake) Redis."""
    return FestivalStore(lock=RedisLock(fake_redis, "festival:test", timeout=10, blocking_timeout=5))


def create_event(client: TestClient, name: str = "Fall Festival") -> dict:
    response = client.post("/api/events", json={"eventName": name})
    response.raise_for_status()
    return response.json()


def register_booth(client: TestClient, admin_id: str, name: str = "Takoyaki", location: str = "Gate A") -> dict:
    response = client.post(
        f"/api/events/{admin_id}/booths",
        json={"boothName": name, "location": location},
    )
    response.raise_for_status()
    return response.json()
