import pytest

from dstructs.binary_tree import EmptyTreeError
from dstructs.search_tree import DuplicateItemError, ItemNotFoundError, SearchTree

ITEMS = [37, 24, 42, 32, 7, 2, 40, 45, 120]


def make(items):
    tree = SearchTree()
    for item in items:
        tree.insert(item)
    return tree


@pytest.fixture
def t1():
    return make(ITEMS)


def test_inorder_is_sorted(t1):
    assert list(t1.inorder()) == sorted(ITEMS)


def test_preorder_keeps_insertion_root(t1):
    assert list(t1.preorder())[0] == 37


def test_duplicate_insert_raises(t1):
    with pytest.raises(DuplicateItemError):
        t1.insert(42)
    assert t1.node_count() == len(ITEMS)


def test_search(t1):
    for item in ITEMS:
        assert t1.search(item)
        assert item in t1
    assert not t1.search(1000)
    assert 3 not in t1


def test_search_empty():
    assert SearchTree().search(5) is False


def test_statistics_from_demo(t1):
    assert t1.max() == 120
    assert t1.min() == 2
    assert t1.total() == sum(ITEMS)
    assert t1.height() == 4
    assert t1.count_single_parents() == 2
    assert t1.count_even() == 6
    assert t1.count_internal_nodes() == t1.leaves_count() + t1.count_single_parents()


@pytest.mark.parametrize("victim", ITEMS)
def test_delete_each_item(t1, victim):
    t1.delete(victim)
    remaining = sorted(item for item in ITEMS if item != victim)
    assert list(t1.inorder()) == remaining
    assert victim not in t1
    assert t1.node_count() == len(ITEMS) - 1


def test_delete_root_uses_predecessor(t1):
    t1.delete(37)
    assert t1.root.info == 32


def test_delete_until_empty(t1):
    for item in ITEMS:
        t1.delete(item)
    assert t1.is_empty()
    with pytest.raises(EmptyTreeError):
        t1.max()


def test_delete_missing_raises(t1):
    with pytest.raises(ItemNotFoundError):
        t1.delete(1000)
    assert list(t1.inorder()) == sorted(ITEMS)


def test_delete_from_empty_raises():
    with pytest.raises(ItemNotFoundError):
        SearchTree().delete(1)


def test_increment_by():
    tree = make([2, 1, 3, 7, 8])
    before = list(tree.preorder())
    tree.increment_by(5)
    assert list(tree.preorder()) == [value + 5 for value in before]
    assert 7 in tree and 13 in tree and 1 not in tree


def test_copy_keeps_type(t1):
    duplicate = t1.copy()
    assert isinstance(duplicate, SearchTree)
    duplicate.insert(1)
    assert 1 in duplicate
    assert 1 not in t1


def test_sorted_inserts_make_a_chain():
    tree = make(range(2000))
    assert tree.height() == 2000
    assert list(tree.inorder()) == list(range(2000))