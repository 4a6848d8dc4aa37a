"""
Response Cache Tests

A manual clock drives TTL expiry.
"""

import pytest

from github_widgets.storage import ResponseCache, activity_cache_key, most_starred_cache_key, timeline_cache_key


class ManualClock:
    def __init__(self):
        self.ms = 0.0

    def __call__(self):
        return self.ms


@pytest.fixture
def clock():
    return ManualClock()


class TestLru:

    def test_get_after_set(self, clock):
        cache = ResponseCache(max_entries=2, ttl_ms=1000, clock=clock)
        cache.set("a", "<svg/>")
        assert cache.get("a") == "<svg/>"

    def test_miss(self, clock):
        cache = ResponseCache(clock=clock)
        assert cache.get("nope") is None

    def test_least_recently_used_evicted(self, clock):
        cache = ResponseCache(max_entries=2, ttl_ms=1000, clock=clock)
        cache.set("a", "A")
        cache.set("b", "B")
        cache.get("a")
        cache.set("c", "C")
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert cache.get_stats().eviction_count == 1

    def test_overwrite_does_not_evict(self, clock):
        cache = ResponseCache(max_entries=2, ttl_ms=1000, clock=clock)
        cache.set("a", "A")
        cache.set("b", "B")
        cache.set("a", "A2")
        assert len(cache) == 2
        assert cache.get("a") == "A2"
        assert cache.get_stats().eviction_count == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            ResponseCache(max_entries=0)


class TestTtl:

    def test_expires(self, clock):
        cache = ResponseCache(ttl_ms=1000, clock=clock)
        cache.set("a", "A")
        clock.ms = 1000
        assert cache.get("a") is None
        assert len(cache) == 0

    def test_read_refreshes_age(self, clock):
        cache = ResponseCache(ttl_ms=1000, clock=clock)
        cache.set("a", "A")
        clock.ms = 900
        assert cache.get("a") == "A"
        clock.ms = 1800
        assert cache.get("a") == "A"

    def test_invalidate_and_clear(self, clock):
        cache = ResponseCache(clock=clock)
        cache.set("a", "A")
        cache.set("b", "B")
        cache.invalidate("a")
        cache.invalidate("missing")
        assert "a" not in cache
        cache.clear()
        assert len(cache) == 0


class TestStats:

    def test_hit_rate(self, clock):
        cache = ResponseCache(clock=clock)
        cache.set("a", "A")
        cache.get("a")
        cache.get("a")
        cache.get("b")
        cache.get("c")
        stats = cache.get_stats()
        assert (stats.hit_count, stats.miss_count, stats.total_entries) == (2, 2, 1)
        assert stats.hit_rate == 0.5

    def test_empty_hit_rate(self):
        assert ResponseCache().get_stats().hit_rate == 0.0


class TestKeys:

    def test_timeline_key_hashes_csv(self):
        key = timeline_cache_key("company,start\nAcme,2020", True)
        prefix, digest, flag = key.split(":")
        assert prefix == "experience-timeline"
        assert len(digest) == 64
        assert flag == "includeDates=true"

    def test_timeline_key_depends_on_flag_and_body(self):
        assert timeline_cache_key("x", True) != timeline_cache_key("x", False)
        assert timeline_cache_key("x", True) != timeline_cache_key("y", True)

    def test_activity_key(self):
        assert activity_cache_key("octocat", "2024-01-01", "2024-06-30") == \
            "timeseries-history:octocat:2024-01-01:2024-06-30"
        assert activity_cache_key("octocat", None, None) == "timeseries-history:octocat:default:default"

    def test_most_starred_key(self):
        assert most_starred_cache_key("octocat", 3, None, "radical", None) == \
            "most-starred:octocat:3:default:radical:default"
        assert most_starred_cache_key("octocat", 5, "Top", "radical", 2.5) == "most-starred:octocat:5:Top:radical:2.5"

    def test_most_starred_key_depends_on_every_parameter(self):
        base = most_starred_cache_key("octocat", 3, None, "radical", None)
        assert most_starred_cache_key("octocat", 4, None, "radical", None) != base
        assert most_starred_cache_key("octocat", 3, "Mine", "radical", None) != base
        assert most_starred_cache_key("octocat", 3, None, "timeline", None) != base
        assert most_starred_cache_key("octocat", 3, None, "radical", 1.0) != base
