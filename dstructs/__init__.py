"""Fixed-capacity array list, binary tree and binary search tree, with two demo commands."""

__version__ = "0.1.0"
__all__ = ["array_list", "binary_tree", "search_tree", "list_demo", "tree_demo"]