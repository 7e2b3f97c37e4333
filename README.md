# dstructs

Small, readable data structures and two demo commands. The package uses only the
standard library.

## Modules

### `dstructs.array_list`

`ArrayList(max_size=100)` is a list that holds at most `max_size` items. A negative
`max_size` raises `ValueError`.

- `len(items)`, `iter(items)`, `items[i]` and `items[i] = value`. A location outside
  `0 <= i < len(items)` raises `IndexError`.
- `is_empty()`, `is_full()` and `max_size()`.
- `insert_at(location, item)` accepts a location from 0 to `len(items)`. `append(item)`
  adds an item at the end. On a full list, both raise `ListFullError`.
- `insert(item)` appends an item only if no equal item is present. A duplicate raises
  `DuplicateItemError`, the same class that `dstructs.search_tree` uses.
- `remove_at(location)` removes by position. `remove(item)` removes the first equal
  item and raises `ValueError` if the list is empty or the item is absent.
- `find(item)` returns the index of the first equal item, or -1.
- `is_item_at_equal(location, item)`, `clear()` and `copy()`.
- `remove_duplicates()` keeps the first occurrence of each value and preserves order.

### `dstructs.binary_tree`

`BinaryTree(root=None)` is a tree of linked `TreeNode(info, left, right)` objects.

- `inorder()`, `preorder()` and `postorder()` return iterators over the values.
- `height()`, `node_count()` and `leaves_count()` return 0 for an empty tree.
- `total()` returns the sum of the values, or 0 for an empty tree.
- `count_internal_nodes()` counts the nodes that lack at least one child. Leaves are
  included in this count.
- `max()`, `min()`, `count_single_parents()` (nodes with exactly one child) and
  `count_even()` raise `EmptyTreeError` on an empty tree.
- `is_empty()`, `clear()` and `copy()`. `copy()` returns an independent tree of the
  same type.

### `dstructs.search_tree`

`SearchTree` is a binary search tree built on `BinaryTree`.

- `insert(item)` raises `DuplicateItemError` if the value is already present.
- `search(item)` and `item in tree` test for membership.
- `delete(item)` raises `ItemNotFoundError` (a `KeyError`) if the tree is empty or the
  item is absent.
- `increment_by(amount)` adds `amount` to every value.

## Install

    pip install .

Add the test extra to run the tests:

    pip install ".[test]"
    pytest

## Example

```python
from dstructs.search_tree import SearchTree

tree = SearchTree()
for n in (37, 24, 42, 32, 7, 2, 40, 45, 120):
    tree.insert(n)

list(tree.inorder())   # [2, 7, 24, 32, 37, 40, 42, 45, 120]
tree.height()          # 4
tree.max(), tree.min() # (120, 2)
32 in tree             # True
tree.delete(24)
```

```python
from dstructs.array_list import ArrayList

items = ArrayList(10)
for n in (1, 2, 2, 3, 1):
    items.append(n)
items.remove_duplicates()
list(items)            # [1, 2, 3]
```

## Demo commands

    dstructs-list-demo 1 2 2 3 4 4 5

This command takes integers as arguments, or reads them from standard input when no
arguments are given. It uses the first seven and fails if there are fewer. It prints
the list at four points: as first read, after removing duplicates, after removing the
item at location 1, and after replacing the item at location 0 with 9.

    dstructs-tree-demo 5 3 8 1 -999

This command takes integers as arguments, or reads them from standard input. It stops
at the sentinel `-999` and builds a search tree from the numbers before it, skipping
duplicates. It prints the tree's inorder traversal, height, node count and leaf count.
It then prints reports on two fixed sample trees. The first report shows a small tree's
preorder traversal before and after adding 5 to every value. The second shows a larger
tree's maximum, inorder traversal, height, sum, minimum, single-child parent count,
even-value count and count of nodes missing a child. A token that is not an integer
makes either command exit with status 1.