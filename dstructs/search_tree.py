"""A binary search tree without duplicate values."""

from __future__ import annotations

from typing import Any, Optional

from dstructs.binary_tree import BinaryTree, TreeNode


class DuplicateItemError(ValueError):
    """Raised when inserting a value already in the tree."""


class ItemNotFoundError(KeyError):
    """Raised when deleting a value that is not in the tree."""


class SearchTree(BinaryTree):
    """Binary search tree: smaller values to the left, larger to the right."""

    def search(self, item: Any) -> bool:
        current = self.root
        while current is not None:
            if current.info == item:
                return True
            current = current.left if current.info > item else current.right
        return False

    def __contains__(self, item: Any) -> bool:
        return self.search(item)

    def insert(self, item: Any) -> None:
        new_node = TreeNode(item)
        if self.root is None:
            self.root = new_node
            return
        current: Optional[TreeNode] = self.root
        parent = self.root
        while current is not None:
            parent = current
            if current.info == item:
                raise DuplicateItemError(
                    f"{item!r} is already in the tree; duplicates are not allowed"
                )
            current = current.left if current.info > item else current.right
        if parent.info > item:
            parent.left = new_node
        else:
            parent.right = new_node

    @staticmethod
    def _detach(node: TreeNode) -> Optional[TreeNode]:
        """Remove ``node`` and return the subtree that takes its place."""
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        trail: Optional[TreeNode] = None
        current = node.left
        while current.right is not None:
            trail = current
            current = current.right
        node.info = current.info
        if trail is None:
            node.left = current.left
        else:
            trail.right = current.left
        return node

    def delete(self, item: Any) -> None:
        if self.root is None:
            raise ItemNotFoundError("cannot delete from an empty tree")
        parent: Optional[TreeNode] = None
        current: Optional[TreeNode] = self.root
        while current is not None and current.info != item:
            parent = current
            current = current.left if current.info > item else current.right
        if current is None:
            raise ItemNotFoundError(f"{item!r} is not in the tree")
        replacement = self._detach(current)
        if parent is None:
            self.root = replacement
        elif parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement

    def increment_by(self, amount: Any) -> None:
        """Add ``amount`` to every value in the tree."""
        for node in self._nodes():
            node.info += amount