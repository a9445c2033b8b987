import time
from datetime import timedelta

import pytest

from pokedexcli.cache import Cache


def _wait_until_gone(cache, key, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if cache.get(key) is None:
            return True
        time.sleep(0.005)
    return cache.get(key) is None


@pytest.mark.parametrize(
    "key, value",
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, value):
    with Cache(5) as cache:
        cache.add(key, value)
        assert cache.get(key) == value


def test_reap_loop():
    with Cache(0.005) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"
        time.sleep(0.010)
        assert _wait_until_gone(cache, "https://example.com")
        assert len(cache) == 0


def test_missing_key_returns_none():
    with Cache(5) as cache:
        assert cache.get("https://example.com") is None


def test_empty_value_is_distinguished_from_missing():
    with Cache(5) as cache:
        cache.add("https://example.com", b"")
        assert cache.get("https://example.com") == b""
        assert "https://example.com" in cache


def test_add_replaces_existing_value():
    with Cache(5) as cache:
        cache.add("https://example.com", b"testdata")
        cache.add("https://example.com", b"moretestdata")
        assert cache.get("https://example.com") == b"moretestdata"
        assert len(cache) == 1


def test_fresh_entries_survive_with_long_interval():
    with Cache(timedelta(minutes=5)) as cache:
        cache.add("https://example.com", b"testdata")
        time.sleep(0.02)
        assert cache.get("https://example.com") == b"testdata"


def test_timedelta_interval_is_converted():
    with Cache(timedelta(seconds=5)) as cache:
        assert cache.interval == 5.0


@pytest.mark.parametrize("interval", [0, -1, timedelta(0)])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)


def test_close_stops_reaper():
    cache = Cache(0.01)
    cache.close()
    assert not cache._reaper.is_alive()