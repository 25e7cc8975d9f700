import pytest

from projecthub.app import create_app
from projecthub.repository import Repository
from projecthub.session import Session
from projecthub.utils.storage import MemoryStorage
from projecthub.utils.store import StoreAdapter


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start=1000.0):
        self.value = start

    def __call__(self):
        return self.value

    def advance(self, seconds):
        self.value += seconds


class CountingStorage(MemoryStorage):
    def __init__(self, items=None):
        super().__init__(items)
        self.writes = 0

    def set_item(self, key, value):
        self.writes += 1
        super().set_item(key, value)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return CountingStorage()


@pytest.fixture
def store(storage):
    return StoreAdapter(storage, prefix="test_")


@pytest.fixture
def session(store):
    return Session(store)


@pytest.fixture
def repository(store, session):
    return Repository(store, session, seed=False)


@pytest.fixture
def seeded_repository(store, session):
    return Repository(store, session, seed=True)


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "LATENCY_SCALE": 0,
            "STORAGE_PREFIX": "test_",
            "JWT_SECRET_KEY": "test-jwt-secret-key-for-testing-only-32b",
        },
        storage=MemoryStorage(),
    )
    yield app
    app.extensions["projecthub"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    resp = client.post("/api/auth/login", json={"email": "demo@example.com", "password": "secret"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.get_json()['access_token']}"}
