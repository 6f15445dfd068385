"""Cache Redis des classements de recherche."""
from typing import Optional

import redis.asyncio as redis
from dishsearch.config import settings


class CacheManager:
    """Accès asynchrone à Redis ; les valeurs sont des réponses sérialisées en JSON."""

    def __init__(self, redis_url: Optional[str] = None, ttl: Optional[int] = None):
        self.redis_url = redis_url or settings.REDIS_URL
        self.ttl = settings.CACHE_TTL if ttl is None else ttl
        self.redis = redis.from_url(self.redis_url, encoding="utf-8", decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        return await self.redis.get(key)

    async def set(self, key: str, value: str, expire: Optional[int] = None):
        """Écrit ``value`` avec un TTL (``self.ttl`` par défaut)."""
        await self.redis.set(key, value, ex=expire or self.ttl)

    async def ping(self) -> bool:
        return await self.redis.ping()

    async def close(self):
        await self.redis.aclose()


cache_manager = CacheManager()
