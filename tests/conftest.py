"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from seiac.app import app
from seiac.dependencies import get_live_store
from seiac.session_store import LiveCoordinationStore

TEACHER_PASSWORD = "seiac-teacher"


class FakeClock:
    """Manually driven epoch-millisecond clock."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> LiveCoordinationStore:
    """Isolated live store driven by the fake clock."""
    return LiveCoordinationStore(clock=clock)


@pytest.fixture
def client(store: LiveCoordinationStore):
    """Create test client wired to the isolated store."""
    app.dependency_overrides[get_live_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(client: TestClient) -> TestClient:
    """Create test client logged in as a teacher."""
    client.post("/login", data={"password": TEACHER_PASSWORD})
    return client
