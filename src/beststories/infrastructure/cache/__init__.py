"""In-memory caching."""

from beststories.infrastructure.cache.ttl_cache import CacheEntry, TTLCache

__all__ = ["CacheEntry", "TTLCache"]
