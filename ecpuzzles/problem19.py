"""Puzzle over a binary search tree of named, numbered entries."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from .tree import Node, Tree

_TARGET = 500000


def _read_pair(line: str) -> tuple[int, str]:
    fields = line.split()
    if len(fields) < 3:
        raise ValueError(f"malformed line: {line!r}")
    name, _, number = fields[:3]
    try:
        return int(number), name
    except ValueError:
        raise ValueError(f"malformed number in line: {line!r}") from None


def _next_pair(lines: Iterator[str]) -> tuple[int, str]:
    line = next(lines, "")
    if not line:
        raise ValueError("missing query pair")
    return _read_pair(line)


@dataclass
class Solution:
    """Parsed puzzle: the tree, its height and two query pairs."""

    tree: Tree
    height: int
    first: tuple[int, str]
    second: tuple[int, str]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> Solution:
        """Build a solution from input lines; raises ValueError on bad input."""
        stripped = (line.rstrip("\r\n") for line in lines)
        tree = Tree()
        height = 0
        for line in stripped:
            if not line:
                break
            key, name = _read_pair(line)
            try:
                depth = tree.insert(key, name)
            except KeyError:
                raise ValueError(f"duplicate key {key}") from None
            height = max(height, depth)
        first = _next_pair(stripped)
        second = _next_pair(stripped)
        return cls(tree, height, first, second)

    def part1(self) -> int:
        """Height of the tree times the largest running sum of keys on one level."""
        sums = [0] * self.height
        best = 0
        stack: list[tuple[Optional[Node], int]] = [(self.tree.root, 0)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                continue
            sums[depth] += node.key
            best = max(best, sums[depth])
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
        return self.height * best

    def part2(self) -> str:
        """Names along the search path for the fixed target key, joined by '-'."""
        names = []
        node = self.tree.root
        while node is not None:
            names.append(node.value)
            following = node.next(_TARGET)
            if following is node:
                break
            node = following
        return "-".join(names)

    def part3(self) -> str:
        """Name of the deepest node on both query keys' search paths."""
        node = self.tree.root
        if node is None:
            raise ValueError("the tree is empty")
        while True:
            towards_first = node.next(self.first[0])
            towards_second = node.next(self.second[0])
            if (
                towards_first is None
                or towards_second is None
                or towards_first is not towards_second
                or towards_first is node
            ):
                return node.value
            node = towards_first


def main(argv: Optional[list[str]] = None) -> int:
    """Solve the puzzle for the input file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: solve <input>")
        return 1
    path = args[0]
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        print(f"Cannot open {path}", file=sys.stderr)
        return 2
    with handle:
        try:
            solution = Solution.parse(handle)
        except ValueError:
            print(f"Error reading {path}", file=sys.stderr)
            return 3
    try:
        answers = (solution.part1(), solution.part2(), solution.part3())
    except ValueError:
        print(f"Error reading {path}", file=sys.stderr)
        return 3
    for answer in answers:
        print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())