"""Command that exercises an ArrayList on a handful of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from dstructs.array_list import ArrayList, ListFullError

COUNT = 7


def _join(items: Iterable[object]) -> str:
    return " ".join(str(item) for item in items)


def run(numbers: Iterable[int]) -> list[str]:
    """Build a list from ``numbers``, edit it, and describe each stage."""
    values = ArrayList()
    for location, number in enumerate(numbers):
        values.insert_at(location, number)
    lines = [f"original list: {_join(values)}"]
    values.remove_duplicates()
    lines.append(f"List after removing duplicates: {_join(values)}")
    values.remove_at(1)
    lines.append(f"after removing item at location 1: {_join(values)}")
    values[0] = 9
    lines.append(f"after replacing item at location 0: {_join(values)}")
    return lines


def _read_stdin() -> list[str]:
    if sys.stdin.isatty():
        print("insert values for list: ", end="", flush=True)
    return sys.stdin.read().split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Edit a list of {COUNT} integers read from the arguments or stdin."
    )
    parser.add_argument("numbers", nargs="*", help="integers to put in the list")
    args = parser.parse_args(argv)
    tokens = args.numbers or _read_stdin()
    try:
        numbers = [int(token) for token in tokens[:COUNT]]
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if len(numbers) < COUNT:
        print(f"error: expected {COUNT} integers, got {len(numbers)}", file=sys.stderr)
        return 1
    try:
        lines = run(numbers)
    except (IndexError, ListFullError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())