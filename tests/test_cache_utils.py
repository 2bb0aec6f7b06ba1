import uuid

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from api.analytics.analytics_schema import EntityStatsOut
from utils import cache_utils
from utils.cache_utils import CacheManager, cache_result
from tests.fakes import FakeRedis


class DownRedis:
    async def get(self, key):
        raise RedisConnectionError("down")

    async def setex(self, key, ttl, value):
        raise RedisConnectionError("down")


class TestCacheManager:
    def test_disabled_without_url(self):
        assert not CacheManager().enabled
        assert CacheManager("redis://localhost:6379/0").enabled

    def test_key_ignores_non_plain_arguments(self):
        event_id = uuid.uuid4()
        a = CacheManager.generate_cache_key("summary", event_id, object())
        b = CacheManager.generate_cache_key("summary", event_id, object())
        c = CacheManager.generate_cache_key("summary", uuid.uuid4())

        assert a == b
        assert a != c
        assert a.startswith("cache:summary:")

    @pytest.mark.asyncio
    async def test_set_then_get(self):
        manager = CacheManager(client=FakeRedis())

        assert await manager.set("k", {"total": 3}, expiry_seconds=30)
        assert await manager.get("k") == {"total": 3}
        assert await manager.get("missing") is None

    @pytest.mark.asyncio
    async def test_errors_degrade_to_a_miss(self):
        manager = CacheManager(client=DownRedis())

        assert await manager.get("k") is None
        assert await manager.set("k", {"total": 3}) is False

    @pytest.mark.asyncio
    async def test_delete_pattern_is_a_noop_when_disabled(self):
        assert await CacheManager().delete_pattern("cache:event_summary:*") == 0


class TestCacheResult:
    @pytest.mark.asyncio
    async def test_passthrough_when_disabled(self, monkeypatch):
        monkeypatch.setattr(cache_utils, "cache_manager", CacheManager())
        calls = []

        @cache_result(key_prefix="stats")
        async def compute(entity_id):
            calls.append(entity_id)
            return EntityStatsOut(entity_id=entity_id, counterpart_count=1, total_scans=2)

        entity_id = uuid.uuid4()
        await compute(entity_id)
        await compute(entity_id)

        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_second_call_served_from_cache(self, monkeypatch):
        fake = FakeRedis()
        monkeypatch.setattr(cache_utils, "cache_manager", CacheManager(client=fake))
        calls = []

        @cache_result(expiry_seconds=15, key_prefix="stats")
        async def compute(entity_id, store):
            calls.append(entity_id)
            return EntityStatsOut(entity_id=entity_id, counterpart_count=1, total_scans=2)

        entity_id = uuid.uuid4()
        first = await compute(entity_id, object())
        second = await compute(entity_id, object())

        assert len(calls) == 1
        assert isinstance(first, EntityStatsOut)
        assert second == {
            "entity_id": str(entity_id),
            "counterpart_count": 1,
            "total_scans": 2,
            "last_scan": None,
        }
        assert list(fake.ttl.values()) == [15]

        assert await compute.cache_clear() == 1
        await compute(entity_id, object())
        assert len(calls) == 2
