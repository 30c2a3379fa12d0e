"""Unit tests for RedisStore lifecycle and error translation (mocked redis client)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from src.ft_common.errors import StoreReadError, StoreUnavailableError, StoreWriteError
from src.ft_common.redis_client import RedisStore


def _mock_client() -> MagicMock:
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def client() -> MagicMock:
    return _mock_client()


@pytest.fixture
async def store(client: MagicMock) -> RedisStore:
    with patch("src.ft_common.redis_client.aioredis.from_url", return_value=client):
        s = RedisStore("redis://localhost:6379/0")
        await s.open()
    return s


class TestLifecycle:
    async def test_not_open_until_open_called(self) -> None:
        s = RedisStore("redis://localhost:6379/0")
        assert s.is_open is False
        with pytest.raises(StoreUnavailableError):
            await s.get("k")
        with pytest.raises(StoreUnavailableError):
            await s.setex("k", 60, "v")

    async def test_open_pings_and_decodes_responses(self, client: MagicMock) -> None:
        with patch(
            "src.ft_common.redis_client.aioredis.from_url", return_value=client
        ) as from_url:
            s = RedisStore("redis://cache:6379/1")
            await s.open()

        from_url.assert_called_once_with("redis://cache:6379/1", decode_responses=True)
        client.ping.assert_awaited_once()
        assert s.is_open is True

    async def test_open_twice_reuses_connection(self, client: MagicMock) -> None:
        with patch(
            "src.ft_common.redis_client.aioredis.from_url", return_value=client
        ) as from_url:
            s = RedisStore("redis://localhost")
            await s.open()
            await s.open()
        assert from_url.call_count == 1

    async def test_open_failure_releases_pool(self, client: MagicMock) -> None:
        client.ping = AsyncMock(side_effect=RedisConnectionError("refused"))
        with patch("src.ft_common.redis_client.aioredis.from_url", return_value=client):
            s = RedisStore("redis://localhost")
            with pytest.raises(StoreUnavailableError):
                await s.open()
        client.aclose.assert_awaited_once()
        assert s.is_open is False

    async def test_close(self, store: RedisStore, client: MagicMock) -> None:
        await store.close()
        client.aclose.assert_awaited_once()
        assert store.is_open is False
        with pytest.raises(StoreUnavailableError):
            await store.get("k")

    async def test_close_without_open_is_noop(self) -> None:
        await RedisStore("redis://localhost").close()


class TestGet:
    async def test_returns_value(self, store: RedisStore, client: MagicMock) -> None:
        client.get = AsyncMock(return_value='{"a": 1}')
        assert await store.get("k") == '{"a": 1}'
        client.get.assert_awaited_once_with("k")

    async def test_returns_none_on_miss(self, store: RedisStore) -> None:
        assert await store.get("missing") is None

    @pytest.mark.parametrize("exc", [RedisConnectionError("gone"), RedisTimeoutError("slow")])
    async def test_connection_loss_is_unavailable(
        self, store: RedisStore, client: MagicMock, exc: Exception
    ) -> None:
        client.get = AsyncMock(side_effect=exc)
        with pytest.raises(StoreUnavailableError):
            await store.get("k")

    async def test_protocol_error_is_read_error(
        self, store: RedisStore, client: MagicMock
    ) -> None:
        client.get = AsyncMock(side_effect=ResponseError("WRONGTYPE"))
        with pytest.raises(StoreReadError) as exc_info:
            await store.get("k")
        assert exc_info.value.code == 9102
        assert "WRONGTYPE" in exc_info.value.message


class TestSetex:
    async def test_passes_ttl_and_value(self, store: RedisStore, client: MagicMock) -> None:
        await store.setex("k", 3600, "[]")
        client.setex.assert_awaited_once_with("k", 3600, "[]")

    async def test_connection_loss_is_unavailable(
        self, store: RedisStore, client: MagicMock
    ) -> None:
        client.setex = AsyncMock(side_effect=RedisConnectionError("gone"))
        with pytest.raises(StoreUnavailableError):
            await store.setex("k", 60, "v")

    async def test_protocol_error_is_write_error(
        self, store: RedisStore, client: MagicMock
    ) -> None:
        client.setex = AsyncMock(side_effect=ResponseError("OOM"))
        with pytest.raises(StoreWriteError) as exc_info:
            await store.setex("k", 60, "v")
        assert exc_info.value.code == 9103
