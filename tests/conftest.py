"""Shared test fixtures."""

import os

# Settings() has no default for JWT_SECRET; set one before any src import.
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.main import app  # noqa: E402


class FakeStore:
    """In-memory stand-in for RedisStore with a manually advanced clock.

    Mirrors Redis SETEX semantics: a write replaces the value and resets its
    expiry, and GET never returns an entry whose TTL has elapsed.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.data: dict[str, tuple[str, float]] = {}
        self.get_calls: list[str] = []
        self.setex_calls: list[tuple[str, int, str]] = []

    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        entry = self.data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.data[key]
            return None
        return value

    async def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        self.setex_calls.append((key, ttl_seconds, value))
        self.data[key] = (value, self.now + ttl_seconds)

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints (no lifespan)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
