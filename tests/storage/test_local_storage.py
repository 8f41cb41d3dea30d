"""Unit tests for LocalObjectStore."""

import pytest

from protochain.core.chain import NOT_FOUND
from protochain.core.identity import ObjectId
from protochain.storage.local import LocalObjectStore
from protochain.storage.protocol import PrototypeInUseError, UnknownObjectError


@pytest.fixture
def parent_child() -> tuple[LocalObjectStore, ObjectId, ObjectId]:
    """Create a root object and one object delegating to it."""
    store = LocalObjectStore()
    parent = store.create_object()
    child = store.create_object(parent)
    return store, parent, child


def test_new_object_has_no_own_properties(store) -> None:
    obj = store.create_object()

    assert store.own_keys(obj) == ()
    assert store.prototype_of(obj) is None
    assert store.object_exists(obj)


def test_prototype_link_is_recorded(parent_child) -> None:
    store, parent, child = parent_child

    assert store.prototype_of(child) == parent
    assert store.prototype_of(parent) is None


def test_create_with_unknown_prototype_fails(store) -> None:
    with pytest.raises(UnknownObjectError):
        store.create_object(ObjectId(index=42))


def test_set_get_and_has_own(store) -> None:
    obj = store.create_object()

    store.set_own(obj, "sides", 4)

    assert store.has_own(obj, "sides")
    result = store.get_own(obj, "sides")
    assert result.value == 4
    assert result.owner == obj
    assert store.get_own(obj, "color") is NOT_FOUND


def test_set_own_overwrites(store) -> None:
    obj = store.create_object()
    store.set_own(obj, "sides", 3)
    store.set_own(obj, "sides", 4)

    assert store.get_own(obj, "sides").value == 4
    assert store.own_keys(obj) == ("sides",)


def test_set_own_never_touches_prototype(parent_child) -> None:
    store, parent, child = parent_child
    store.set_own(parent, "sides", 4)

    store.set_own(child, "sides", 99)

    assert store.get_own(parent, "sides").value == 4
    assert store.get_own(child, "sides").value == 99


def test_get_own_does_not_delegate(parent_child) -> None:
    store, parent, child = parent_child
    store.set_own(parent, "sides", 4)

    assert not store.has_own(child, "sides")
    assert store.get_own(child, "sides") is NOT_FOUND


def test_delete_own(store) -> None:
    obj = store.create_object()
    store.set_own(obj, "sides", 4)

    assert store.delete_own(obj, "sides") is True
    assert store.delete_own(obj, "sides") is False
    assert not store.has_own(obj, "sides")


def test_own_keys_keep_insertion_order(store) -> None:
    obj = store.create_object()
    for name in ("width", "height", "color"):
        store.set_own(obj, name, 1)

    assert store.own_keys(obj) == ("width", "height", "color")


def test_set_own_rejects_empty_name(store) -> None:
    obj = store.create_object()

    with pytest.raises(ValueError):
        store.set_own(obj, "", 1)


def test_destroy_refuses_live_prototype(parent_child) -> None:
    """Prototypes outlive the objects that delegate to them."""
    store, parent, child = parent_child

    with pytest.raises(PrototypeInUseError):
        store.destroy_object(parent)

    store.destroy_object(child)
    store.destroy_object(parent)
    assert list(store.all_objects()) == []


def test_stale_handle_is_rejected_after_recycle(store) -> None:
    old = store.create_object()
    store.set_own(old, "secret", 1)
    store.destroy_object(old)

    new = store.create_object()

    assert new.index == old.index
    assert not store.object_exists(old)
    assert store.own_keys(new) == ()
    with pytest.raises(UnknownObjectError):
        store.get_own(old, "secret")


def test_all_objects_in_creation_order(store) -> None:
    created = [store.create_object() for _ in range(3)]

    assert list(store.all_objects()) == created


def test_snapshot_restore_round_trip(parent_child) -> None:
    store, parent, child = parent_child
    store.set_own(parent, "sides", 4)
    data = store.snapshot()

    store.set_own(parent, "sides", 99)
    store.destroy_object(child)

    store.restore(data)

    assert store.object_exists(child)
    assert store.prototype_of(child) == parent
    assert store.get_own(parent, "sides").value == 4
    assert store.create_object().index == 2


def test_destroy_while_iterating_all_objects(store) -> None:
    for _ in range(3):
        store.create_object()

    for obj in store.all_objects():
        store.destroy_object(obj)

    assert list(store.all_objects()) == []


@pytest.mark.parametrize("method", ["get_own", "has_own", "delete_own"])
def test_reads_and_deletes_reject_empty_name(store, method) -> None:
    """Every name-taking operation validates names the way set_own does."""
    obj = store.create_object()

    with pytest.raises(ValueError):
        getattr(store, method)(obj, "")
    with pytest.raises(TypeError):
        getattr(store, method)(obj, 3)
