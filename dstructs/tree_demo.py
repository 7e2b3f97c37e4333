"""Command that builds a search tree from integers and reports on it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress
from itertools import takewhile
from typing import Optional

from dstructs.search_tree import DuplicateItemError, SearchTree

SENTINEL = -999


def read_numbers(tokens: Iterable[str]) -> list[int]:
    """Parse integer tokens up to, not including, the sentinel -999."""
    return list(takewhile(lambda number: number != SENTINEL, map(int, tokens)))


def _join(items: Iterable[object]) -> str:
    return " ".join(str(item) for item in items)


def _build(numbers: Iterable[int]) -> SearchTree:
    tree = SearchTree()
    for number in numbers:
        with suppress(DuplicateItemError):
            tree.insert(number)
    return tree


def _sample_reports() -> list[str]:
    small = _build([2, 1, 3, 7, 8])
    lines = [f"Preorder: {_join(small.preorder())}"]
    small.increment_by(5)
    lines.append(f"Preorder after adding 5: {_join(small.preorder())}")
    lines.append("")

    sample = _build([37, 24, 42, 32, 7, 2, 40, 45, 120])
    lines += [
        f"Max: {sample.max()}",
        f"Inorder: {_join(sample.inorder())}",
        f"Height: {sample.height()}",
        f"Sum: {sample.total()}",
        f"Min: {sample.min()}",
        f"Single-child parents: {sample.count_single_parents()}",
        f"Even values: {sample.count_even()}",
        f"Nodes missing a child: {sample.count_internal_nodes()}",
    ]
    return lines


def report(numbers: Iterable[int]) -> list[str]:
    """Describe a tree built from ``numbers``, followed by fixed sample trees."""
    tree = _build(numbers)
    lines = [
        f"Tree nodes in inorder: {_join(tree.inorder())}",
        f"Tree Height: {tree.height()}",
        f"Nodes count: {tree.node_count()}",
        f"Leaves count: {tree.leaves_count()}",
        "",
    ]
    return lines + _sample_reports()


def _read_stdin() -> list[str]:
    if sys.stdin.isatty():
        print(f"Enter numbers ending with {SENTINEL}", flush=True)
    return sys.stdin.read().split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a binary search tree from integers and report on it."
    )
    parser.add_argument(
        "numbers", nargs="*", help=f"integers to insert, optionally ending with {SENTINEL}"
    )
    args = parser.parse_args(argv)
    tokens = args.numbers or _read_stdin()
    try:
        numbers = read_numbers(tokens)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for line in report(numbers):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())