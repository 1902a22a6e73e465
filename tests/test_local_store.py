from __future__ import annotations

from storefront.core.local_store import LocalStore


def test_local_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "local.json"
    store = LocalStore(path)
    store.set_item("hasSoldBefore", "true")
    store.set_item("trendingAuctions", '[{"bid": "$5"}]')

    loaded = LocalStore(path)
    assert loaded.get_item("hasSoldBefore") == "true"
    assert loaded.get_item("trendingAuctions") == '[{"bid": "$5"}]'


def test_remove_item(tmp_path):
    path = tmp_path / "local.json"
    store = LocalStore(path)
    store.set_item("featuredAuctions", "[]")
    store.remove_item("featuredAuctions")
    store.remove_item("never-set")
    assert LocalStore(path).get_item("featuredAuctions") is None


def test_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "local.json"
    path.write_text("{not json")
    assert LocalStore(path).get_item("anything") is None

    path.write_text('["a", "list"]')
    assert LocalStore(path).get_item("anything") is None


def test_in_memory_store_writes_nothing(tmp_path):
    store = LocalStore()
    store.set_item("key", "value")
    assert store.get_item("key") == "value"
    assert list(tmp_path.iterdir()) == []
