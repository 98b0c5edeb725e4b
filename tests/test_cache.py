"""Tests for the TTL cache."""

from unittest.mock import patch


def test_set_and_get():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache()
    cache.set("a", {"value": 1})

    assert cache.get("a") == {"value": 1}
    assert len(cache) == 1


def test_miss_counts():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache()
    assert cache.get("missing") is None

    stats = cache.stats()
    assert stats["misses"] == 1
    assert stats["hits"] == 0
    assert stats["hit_rate_percent"] == 0


def test_hit_rate():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache()
    cache.set("a", 1)
    cache.get("a")
    cache.get("a")
    cache.get("b")

    assert cache.stats()["hit_rate_percent"] == 66.7


def test_entries_expire():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache(ttl=10)
    with patch("tgpp_guidance.utils.cache.time", return_value=1000.0):
        cache.set("a", 1)
    with patch("tgpp_guidance.utils.cache.time", return_value=1011.0):
        assert cache.get("a") is None

    assert len(cache) == 0
    assert cache.stats()["misses"] == 1


def test_full_cache_evicts_soonest_expiry():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache(ttl=100, max_keys=2)
    with patch("tgpp_guidance.utils.cache.time", return_value=1000.0):
        cache.set("old", 1)
    with patch("tgpp_guidance.utils.cache.time", return_value=1001.0):
        cache.set("newer", 2)
        cache.set("newest", 3)
        assert cache.get("old") is None
        assert cache.get("newer") == 2
        assert cache.get("newest") == 3


def test_overwrite_does_not_evict():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache(max_keys=1)
    cache.set("a", 1)
    cache.set("a", 2)

    assert cache.get("a") == 2


def test_disabled_cache_stores_nothing():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache(enabled=False)
    cache.set("a", 1)

    assert cache.get("a") is None
    assert cache.stats()["enabled"] is False
    assert cache.stats()["misses"] == 0


def test_clear_resets_counters():
    from tgpp_guidance.utils.cache import TTLCache

    cache = TTLCache()
    cache.set("a", 1)
    cache.get("a")
    cache.clear()

    stats = cache.stats()
    assert stats["keys"] == 0
    assert stats["hits"] == 0


def test_get_cache_uses_config(monkeypatch):
    from tgpp_guidance.config import Config
    from tgpp_guidance.utils import cache as cache_module

    monkeypatch.setattr(cache_module, "_cache", None)
    monkeypatch.setattr(Config, "CATALOG_CACHE_TTL", 60)

    cache = cache_module.get_cache()

    assert cache.ttl == 60
    assert cache_module.get_cache() is cache
