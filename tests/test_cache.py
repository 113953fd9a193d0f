"""
Tests for the event set cache.
"""

from unittest.mock import patch

from kata_heatmap.cache import EventSetCache


class TestEventSetCache:
    """Tests for EventSetCache."""

    def test_miss_returns_none(self):
        assert EventSetCache().get("warrior") is None

    def test_put_then_get(self):
        cache = EventSetCache()
        stored = cache.put("warrior", ["e1", "e2"])

        assert stored == ("e1", "e2")
        assert cache.get("warrior") == ("e1", "e2")

    def test_username_is_case_insensitive(self):
        cache = EventSetCache()
        cache.put("Warrior", ["e1"])

        assert cache.get("warrior") == ("e1",)

    def test_evicts_least_recently_used(self):
        cache = EventSetCache(max_entries=2)
        cache.put("a", [1])
        cache.put("b", [2])
        cache.get("a")
        cache.put("c", [3])

        assert cache.get("b") is None
        assert cache.get("a") == (1,)
        assert cache.get("c") == (3,)
        assert len(cache) == 2

    def test_expired_entries_dropped(self):
        cache = EventSetCache(ttl_seconds=10)

        with patch("kata_heatmap.cache.monotonic", return_value=100.0):
            cache.put("warrior", ["e1"])
        with patch("kata_heatmap.cache.monotonic", return_value=105.0):
            assert cache.get("warrior") == ("e1",)
        with patch("kata_heatmap.cache.monotonic", return_value=111.0):
            assert cache.get("warrior") is None

        assert len(cache) == 0

    def test_clear(self):
        cache = EventSetCache()
        cache.put("warrior", [])
        cache.clear()

        assert cache.get("warrior") is None

    def test_empty_event_set_is_cached(self):
        cache = EventSetCache()
        cache.put("newbie", [])

        assert cache.get("newbie") == ()
