import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.cache import TTLCache


class FakeClock:
    """Manually advanced time source for TTL tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache[str](clock=clock)


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("REGION", "test-region")
    monkeypatch.setenv("GIT_SHA", "abc123")
    monkeypatch.delenv("EMBED_CACHE_TTL_SECONDS", raising=False)
    return Settings()


@pytest.fixture
def app(settings, clock):
    return create_app(settings=settings, clock=clock)


@pytest.fixture
def client(app):
    return TestClient(app)
