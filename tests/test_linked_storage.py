"""Tests for the linked-list backend's chain bookkeeping."""

import pytest

from src.storage import LinkedStorage


@pytest.fixture
def chain():
    """Linked store starting at id 10, holding x, y, z."""
    store = LinkedStorage(initial_id=10)
    for value in ("x", "y", "z"):
        store.add(value)
    return store


def chain_ids(store):
    return [node.id for node in store._nodes()]


def test_empty_store_has_no_head_or_tail():
    store = LinkedStorage()
    assert store._head is None
    assert store._tail is None


def test_single_entry_is_head_and_tail():
    store = LinkedStorage()
    store.add("only")
    assert store._head is store._tail
    assert store._head.next is None


def test_removing_sole_entry_clears_head_and_tail():
    store = LinkedStorage()
    store.add("only")
    store.remove_by_value("only")

    assert store._head is None
    assert store._tail is None
    assert store._value_type is None


def test_remove_middle(chain):
    chain.remove_by_id(11)

    assert chain.get_all() == ({10: "x", 12: "z"}, True)
    assert chain.add("w") == 13
    assert chain_ids(chain) == [10, 12, 13]
    assert chain._tail.id == 13


def test_remove_head(chain):
    chain.remove_by_id(10)

    assert chain._head.id == 11
    assert chain_ids(chain) == [11, 12]


def test_remove_tail_moves_tail_back(chain):
    chain.remove_by_id(12)

    assert chain._tail.id == 11
    assert chain._tail.next is None
    chain.add("w")
    assert chain_ids(chain) == [10, 11, 13]


def test_remove_head_of_two_leaves_single_node():
    store = LinkedStorage()
    store.add("a")
    store.add("b")

    store.remove_by_id(1)

    assert store._head is store._tail
    assert store._head.id == 2


def test_remove_all_by_value_adjacent_matches():
    store = LinkedStorage()
    for value in ("a", "a", "b", "a", "a"):
        store.add(value)

    store.remove_all_by_value("a")

    assert chain_ids(store) == [3]
    assert store._head is store._tail
    assert len(store) == 1


def test_out_of_range_ids_are_rejected(chain):
    for entry_id in (9, 13, 1000):
        assert chain.get_by_id(entry_id) == (None, False)
        chain.remove_by_id(entry_id)
    assert len(chain) == 3


def test_get_all_does_not_expose_nodes(chain):
    snapshot, _ = chain.get_all()
    assert set(snapshot.values()) == {"x", "y", "z"}


def test_render_format(chain):
    assert chain.render() == "[{10: x}, {11: y}, {12: z}]"
    chain.clear()
    assert chain.render() == "[]"
