"""Integration-test fixtures (require running PostgreSQL + Redis, migrated).

The app lifespan is entered once per session so the result cache is opened
and published on app.state exactly as under uvicorn. When either backend is
unreachable the whole integration suite is skipped.
"""

import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    lifespan = app.router.lifespan_context(app)
    try:
        await lifespan.__aenter__()
    except Exception as exc:  # noqa: BLE001  any startup failure means "no backends"
        pytest.skip(f"PostgreSQL/Redis not available: {exc}")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await lifespan.__aexit__(None, None, None)


@pytest.fixture
def register_and_login(client: AsyncClient):
    """Factory: create a fresh user and return Authorization headers for it."""
    return lambda: _register_and_login(client)


async def _register_and_login(client: AsyncClient) -> dict[str, str]:
    uid = uuid.uuid4().hex[:8]
    creds = {
        "username": f"user_{uid}",
        "email": f"user_{uid}@example.com",
        "password": "TestPass123",
    }
    await client.post("/api/v1/auth/register", json=creds)
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": creds["email"], "password": creds["password"]},
    )
    token = login.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
