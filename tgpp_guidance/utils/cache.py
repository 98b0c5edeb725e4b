"""
TTL cache for catalog lookups

Entries expire after a fixed time-to-live. When the key limit is reached the
entry closest to expiry is evicted to make room.
"""

import logging
import threading
from dataclasses import dataclass
from time import time
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class CachedEntry:
    """Cached value with its expiry time"""
    value: Any
    expires_at: float


class TTLCache:
    """Thread-safe in-memory key/value cache with per-entry expiry"""

    def __init__(self, enabled: bool = True, ttl: int = 7200, max_keys: int = 1000):
        """Initialize cache

        Args:
            enabled: Whether caching is enabled
            ttl: Time-to-live for entries in seconds (default: 2 hours)
            max_keys: Maximum number of live entries
        """
        self.enabled = enabled
        self.ttl = ttl
        self.max_keys = max_keys

        self._lock = threading.RLock()
        self._entries: dict[str, CachedEntry] = {}

        self._hits = 0
        self._misses = 0

        logger.info(f"TTLCache initialized (enabled={enabled}, ttl={ttl}s, max_keys={max_keys})")

    def get(self, key: str) -> Optional[Any]:
        """Get a cached value, or None on miss or expiry"""
        if not self.enabled:
            return None

        with self._lock:
            cached = self._entries.get(key)

            if cached is None:
                self._misses += 1
                return None

            if time() > cached.expires_at:
                logger.debug(f"Cache entry expired: {key}")
                del self._entries[key]
                self._misses += 1
                return None

            self._hits += 1
            logger.debug(f"Cache hit: {key}")
            return cached.value

    def set(self, key: str, value: Any) -> None:
        """Cache a value under key"""
        if not self.enabled:
            return

        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_keys:
                self._evict()
            self._entries[key] = CachedEntry(value=value, expires_at=time() + self.ttl)

    def _evict(self) -> None:
        now = time()
        expired = [key for key, entry in self._entries.items() if now > entry.expires_at]
        for key in expired:
            del self._entries[key]

        if len(self._entries) >= self.max_keys:
            oldest = min(self._entries, key=lambda k: self._entries[k].expires_at)
            del self._entries[oldest]
            logger.debug(f"Evicted cache entry: {oldest}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # ─────────────────────────────────────────────────────────────
    # Stats & Management
    # ─────────────────────────────────────────────────────────────

    def stats(self) -> dict[str, Any]:
        """Get cache statistics

        Returns:
            Dictionary with key count, hits and misses
        """
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

            return {
                "enabled": self.enabled,
                "keys": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
                "ttl_seconds": self.ttl,
            }

    def clear(self) -> None:
        """Clear all entries and reset counters"""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            logger.info(f"Cleared {count} cached entries")


# Global cache instance - initialized lazily to allow config to load first
_cache: Optional[TTLCache] = None


def get_cache() -> TTLCache:
    """Get the global catalog cache

    Creates cache on first call using current config values.
    """
    global _cache
    if _cache is None:
        from ..config import Config
        _cache = TTLCache(
            enabled=Config.ENABLE_CACHING,
            ttl=Config.CATALOG_CACHE_TTL,
            max_keys=Config.CATALOG_CACHE_MAX_KEYS,
        )
    return _cache
