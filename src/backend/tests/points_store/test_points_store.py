import pytest

from stores.points_store import InMemoryPointsStore


def test_put_then_get_returns_same_points():
    store = InMemoryPointsStore()
    store.put("abc-123", 28)
    assert store.get("abc-123") == 28
    assert store.get("abc-123") == 28


def test_unknown_id_returns_none():
    assert InMemoryPointsStore().get("missing") is None


def test_ids_are_never_reused():
    store = InMemoryPointsStore()
    store.put("abc-123", 28)
    with pytest.raises(ValueError):
        store.put("abc-123", 109)
    assert store.get("abc-123") == 28


def test_ids_must_be_non_empty_without_whitespace():
    store = InMemoryPointsStore()
    with pytest.raises(ValueError):
        store.put("", 1)
    with pytest.raises(ValueError):
        store.put("abc 123", 1)


def test_all_returns_copy():
    store = InMemoryPointsStore()
    store.put("a", 1)
    store.put("b", 2)
    snapshot = store.all()
    snapshot["c"] = 3
    assert store.all() == {"a": 1, "b": 2}
    assert len(store) == 2
