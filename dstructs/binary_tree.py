"""A linked binary tree with traversals and whole-tree statistics."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class TreeNode:
    """A node holding a value and links to its two children."""

    info: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class EmptyTreeError(ValueError):
    """Raised when an operation needs at least one node."""


class BinaryTree:
    """A binary tree made of linked :class:`TreeNode` objects."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    def is_empty(self) -> bool:
        return self.root is None

    def _nodes(self) -> Iterator[TreeNode]:
        """Yield every node, parents before children."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _require_root(self) -> TreeNode:
        if self.root is None:
            raise EmptyTreeError("the tree is empty")
        return self.root

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree first, then the node, then the right subtree."""
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.info
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield each node's value before those of its subtrees."""
        return (node.info for node in self._nodes())

    def postorder(self) -> Iterator[Any]:
        """Yield each node's value after those of its subtrees."""
        pending = [self.root] if self.root is not None else []
        visited: list[TreeNode] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return (node.info for node in reversed(visited))

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        levels = 0
        frontier = deque([self.root] if self.root is not None else [])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                node = frontier.popleft()
                if node.left is not None:
                    frontier.append(node.left)
                if node.right is not None:
                    frontier.append(node.right)
        return levels

    def node_count(self) -> int:
        return sum(1 for _ in self._nodes())

    def leaves_count(self) -> int:
        return sum(1 for node in self._nodes() if node.is_leaf)

    def clear(self) -> None:
        self.root = None

    def copy(self) -> "BinaryTree":
        """Return an independent tree of the same type with the same shape and values."""
        if self.root is None:
            return type(self)()
        new_root = TreeNode(self.root.info)
        stack = [(self.root, new_root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = TreeNode(source.left.info)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = TreeNode(source.right.info)
                stack.append((source.right, target.right))
        return type(self)(new_root)

    def max(self) -> Any:
        """Largest value in the tree."""
        self._require_root()
        return max(node.info for node in self._nodes())

    def total(self) -> Any:
        """Sum of all values; 0 when empty."""
        return sum(node.info for node in self._nodes())

    def min(self) -> Any:
        """Smallest value in the tree."""
        self._require_root()
        return min(node.info for node in self._nodes())

    def count_single_parents(self) -> int:
        """Count nodes that have exactly one child."""
        self._require_root()
        return sum(
            1 for node in self._nodes() if (node.left is None) != (node.right is None)
        )

    def count_even(self) -> int:
        """Count nodes whose value is even."""
        self._require_root()
        return sum(1 for node in self._nodes() if node.info % 2 == 0)

    def count_internal_nodes(self) -> int:
        """Count nodes missing at least one child (leaves included); 0 when empty."""
        return sum(
            1 for node in self._nodes() if node.left is None or node.right is None
        )