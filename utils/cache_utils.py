"""
Caching utilities for the event-wide statistics endpoints
"""
import json
import hashlib
import logging
from datetime import date, datetime
from functools import wraps
from typing import Any, Optional, Callable
from uuid import UUID

import redis.asyncio as redis
from redis.exceptions import RedisError

from config.settings import settings

logger = logging.getLogger(__name__)

# Only these argument types take part in a cache key; services and stores do not
_KEY_TYPES = (str, int, float, bool, UUID, date, datetime)


class CacheManager:
    """JSON cache on Redis. Every failure degrades to a cache miss."""

    def __init__(self, redis_url: Optional[str] = None, client=None):
        self._redis_url = redis_url
        self.redis_client = client

    @property
    def enabled(self) -> bool:
        return self.redis_client is not None or bool(self._redis_url)

    def _client(self):
        # Lazy: building the client does not open a connection
        if self.redis_client is None and self._redis_url:
            self.redis_client = redis.from_url(self._redis_url, decode_responses=True)
        return self.redis_client

    @staticmethod
    def generate_cache_key(prefix: str, *args, **kwargs) -> str:
        """Generate a cache key from the plain-valued arguments"""
        parts = [str(a) for a in args if isinstance(a, _KEY_TYPES)]
        parts += [f"{k}={v}" for k, v in sorted(kwargs.items()) if isinstance(v, _KEY_TYPES)]
        digest = hashlib.md5(":".join(parts).encode()).hexdigest()
        return f"cache:{prefix}:{digest}"

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache"""
        try:
            cached_value = await self._client().get(key)
            if cached_value:
                return json.loads(cached_value)
        except (RedisError, json.JSONDecodeError) as e:
            logger.warning("Cache read failed for %s: %s", key, e)
        return None

    async def set(self, key: str, value: Any, expiry_seconds: int = 300) -> bool:
        """Set value in cache"""
        try:
            serialized_value = json.dumps(value, default=str)
            return bool(await self._client().setex(key, expiry_seconds, serialized_value))
        except (RedisError, TypeError) as e:
            logger.warning("Cache write failed for %s: %s", key, e)
            return False

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern"""
        if not self.enabled:
            return 0
        try:
            client = self._client()
            keys = [k async for k in client.scan_iter(match=pattern)]
            if keys:
                return await client.delete(*keys)
            return 0
        except RedisError as e:
            logger.warning("Cache invalidation failed for %s: %s", pattern, e)
            return 0


# Global cache manager instance
cache_manager = CacheManager(settings.REDIS_URL)


def cache_result(expiry_seconds: Optional[int] = None, key_prefix: Optional[str] = None):
    """
    Decorator to cache the JSON form of an async function's result

    Args:
        expiry_seconds: Cache expiry time in seconds (defaults to CACHE_STATS_TTL)
        key_prefix: Optional prefix for cache key
    """
    def decorator(func: Callable) -> Callable:
        prefix = key_prefix or func.__name__

        @wraps(func)
        async def wrapper(*args, **kwargs):
            if not cache_manager.enabled:
                return await func(*args, **kwargs)

            cache_key = cache_manager.generate_cache_key(prefix, *args, **kwargs)
            cached_result = await cache_manager.get(cache_key)
            if cached_result is not None:
                return cached_result

            result = await func(*args, **kwargs)
            payload = result.model_dump(mode="json") if hasattr(result, "model_dump") else result
            await cache_manager.set(cache_key, payload, expiry_seconds or settings.CACHE_STATS_TTL)
            return result

        wrapper.cache_clear = lambda: cache_manager.delete_pattern(f"cache:{prefix}:*")
        return wrapper
    return decorator
