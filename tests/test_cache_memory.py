"""Tests for MemoryCacheStore: storage semantics, statistics and thread safety."""

from __future__ import annotations

import threading

from transdex import MemoryCacheStore, Translation


class TestMemoryCacheStoreBasics:
    def test_miss_returns_none(self) -> None:
        store = MemoryCacheStore()
        assert store.get("en/missing") is None

    def test_set_then_get(self) -> None:
        store = MemoryCacheStore()
        translation = Translation("en", "k", "v")
        store.set("en/k", translation)
        assert store.get("en/k") is translation

    def test_set_overwrites(self) -> None:
        store = MemoryCacheStore()
        store.set("en/k", Translation("en", "k", "old"))
        store.set("en/k", Translation("en", "k", "new"))
        entry = store.get("en/k")
        assert entry is not None
        assert entry.value == "new"
        assert len(store) == 1

    def test_delete(self) -> None:
        store = MemoryCacheStore()
        store.set("en/k", Translation("en", "k", "v"))
        store.delete("en/k")
        assert store.get("en/k") is None
        assert "en/k" not in store

    def test_delete_missing_is_noop(self) -> None:
        store = MemoryCacheStore()
        store.delete("en/never")
        assert len(store) == 0

    def test_keys_snapshot(self) -> None:
        store = MemoryCacheStore()
        store.set("en/a", Translation("en", "a", "1"))
        store.set("lv/a", Translation("lv", "a", "2"))
        assert sorted(store) == ["en/a", "lv/a"]


class TestMemoryCacheStoreStats:
    def test_stats_track_hits_misses_writes(self) -> None:
        store = MemoryCacheStore()
        store.set("en/k", Translation("en", "k", "v"))
        store.get("en/k")
        store.get("en/k")
        store.get("en/other")

        stats = store.get_stats()
        assert stats["size"] == 1
        assert stats["hits"] == 2
        assert stats["misses"] == 1
        assert stats["writes"] == 1
        assert stats["hit_rate"] == 66.67

    def test_empty_stats(self) -> None:
        assert MemoryCacheStore().get_stats()["hit_rate"] == 0.0

    def test_clear_resets(self) -> None:
        store = MemoryCacheStore()
        store.set("en/k", Translation("en", "k", "v"))
        store.get("en/k")
        store.clear()
        assert len(store) == 0
        assert store.hits == store.misses == store.writes == 0


class TestMemoryCacheStoreConcurrency:
    def test_concurrent_set_get_delete(self) -> None:
        store = MemoryCacheStore()
        errors: list[BaseException] = []
        barrier = threading.Barrier(8)

        def worker(worker_id: int) -> None:
            try:
                barrier.wait()
                for i in range(200):
                    key = f"en/k{worker_id}.{i}"
                    store.set(key, Translation("en", f"k{worker_id}.{i}", str(i)))
                    entry = store.get(key)
                    assert entry is not None
                    assert entry.value == str(i)
                    if i % 2:
                        store.delete(key)
            except BaseException as e:  # noqa: BLE001
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(store) == 8 * 100
        assert store.writes == 8 * 200
