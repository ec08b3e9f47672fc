import pytest

from swimscore.core.cache import FileCache


def test_round_trip_and_expiry(monkeypatch, tmp_path):
    cache = FileCache(tmp_path, enabled=True, default_ttl_seconds=60)
    monkeypatch.setattr("swimscore.core.cache.time.time", lambda: 0)
    cache.set("ns", "k", {"v": 1})
    assert cache.get("ns", "k") == {"v": 1}

    monkeypatch.setattr("swimscore.core.cache.time.time", lambda: 61)
    assert cache.get("ns", "k") is None
    assert cache.get_stale("ns", "k") == {"v": 1}


def test_disabled_cache_never_stores(tmp_path):
    cache = FileCache(tmp_path, enabled=False)
    cache.set("ns", "k", {"v": 1})
    assert cache.get_stale("ns", "k") is None
    assert not any(tmp_path.iterdir())


def test_get_or_set_builds_once(tmp_path):
    cache = FileCache(tmp_path, enabled=True)
    calls = []

    def builder():
        calls.append(1)
        return {"v": len(calls)}

    assert cache.get_or_set("ns", "k", builder) == {"v": 1}
    assert cache.get_or_set("ns", "k", builder) == {"v": 1}
    assert len(calls) == 1


def test_stale_if_error_returns_expired_value(monkeypatch, tmp_path):
    cache = FileCache(tmp_path, enabled=True, default_ttl_seconds=1)
    monkeypatch.setattr("swimscore.core.cache.time.time", lambda: 0)
    cache.set("ns", "k", {"v": 1}, ttl_seconds=1)
    monkeypatch.setattr("swimscore.core.cache.time.time", lambda: 100)

    def builder():
        raise RuntimeError("upstream down")

    assert cache.get_or_set("ns", "k", builder, ttl_seconds=1, stale_if_error=True) == {"v": 1}
    with pytest.raises(RuntimeError):
        cache.get_or_set("ns", "k", builder, ttl_seconds=1)


def test_corrupt_entry_is_ignored(tmp_path):
    cache = FileCache(tmp_path, enabled=True)
    cache.set("ns", "k", {"v": 1})
    path = next((tmp_path / "ns").glob("*.json"))
    path.write_text("{broken", encoding="utf-8")
    assert cache.get("ns", "k") is None
