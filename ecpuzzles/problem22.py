"""Puzzle of finding routes through a space swept by moving debris."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import Optional

from .point import Point, lcm
from .ranges import Range
from .rule import Rule, parse_rule

DEFAULT_LOW = Point(0, 0, 0, -1)
DEFAULT_SIZE = Point(10, 15, 60, 3)

_USAGE = "Usage: solve <file> [width[,height[,[depth[,anakata]]]]"

# Each cell of the debris field is a 16-bit word: the low three bits count the
# debris present, then four three-bit fields hold the fewest hits seen per
# cycle, and the top bit marks a cell already reached by the plain search.
_COUNT_MASK = 0x0007
_SEEN_MASK = 0x8000
_FRESH = 0x4920
_WORD_MASK = 0xFFFF
_MAX_HITS = 3

_MOVES = (
    Point(0, 0, 0, 0),
    Point(-1, 0, 0, 0),
    Point(1, 0, 0, 0),
    Point(0, -1, 0, 0),
    Point(0, 1, 0, 0),
    Point(0, 0, -1, 0),
    Point(0, 0, 1, 0),
)

_NUMBER = re.compile(r"\s*([+-]?\d+)")
_SEPARATOR = re.compile(r"\s*(\S)")


class Solution:
    """Debris field over a four-dimensional box; the parts share its state and run in order."""

    def __init__(self, rules: Iterable[Rule], bounds: Range) -> None:
        if bounds.dims != 4:
            raise ValueError("bounds must be four-dimensional")
        self.rules = tuple(rules)
        self.bounds = bounds
        self._space = bounds.project(3)
        sizes = self._space.size()
        if any(extent <= 0 for extent in sizes):
            raise ValueError(f"bounds {bounds} are empty")
        self._length = self._space.length()
        self._period = lcm(sizes)
        self._counts: Optional[list[int]] = None

    def _field(self) -> list[int]:
        if self._counts is None:
            self.part1()
        assert self._counts is not None
        return self._counts

    def part1(self) -> int:
        """Count debris points and record where debris lies at each step of a cycle."""
        counts = [_FRESH] * (self._length * self._period)
        total = 0
        for rule in self.rules:
            for point in self.bounds:
                if not rule.is_debris(point):
                    continue
                total += 1
                position = point
                for offset in range(0, len(counts), self._length):
                    position = self.bounds.wrap(position + rule.velocity)
                    if position.w != 0:
                        continue
                    index = self._space.index(position.project(3))
                    if index:
                        slot = offset + index
                        counts[slot] = (counts[slot] + 1) & _WORD_MASK
        self._counts = counts
        return total

    def part2(self) -> int:
        """Fewest steps from the origin to the far corner without touching debris."""
        counts = self._field()
        target = self.bounds.high.project(3)
        moves = [move.project(3) for move in _MOVES]
        frontier = [Point(0, 0, 0)]
        time = 0
        while frontier:
            base = time % self._period * self._length
            following = []
            for position in frontier:
                if position == target:
                    return time
                for move in moves:
                    step = position + move
                    index = self._space.try_index(step)
                    if index is None:
                        continue
                    slot = base + index
                    if not counts[slot] & (_COUNT_MASK | _SEEN_MASK):
                        counts[slot] |= _SEEN_MASK
                        following.append(step)
            frontier = following
            time += 1
        raise RuntimeError("the far corner cannot be reached")

    def part3(self) -> int:
        """Fewest steps to the far corner arriving with exactly the allowed number of hits."""
        counts = self._field()
        target = self.bounds.high.replace(3, _MAX_HITS)
        frontier = [Point(0, 0, 0, 0)]
        time = 0
        while frontier:
            base = time % self._period * self._length
            shift = (time // self._period + 1) * 3
            following = []
            for position in frontier:
                if position == target:
                    return time
                for move in _MOVES:
                    step = position + move
                    index = self._space.try_index(step.project(3))
                    if index is None:
                        continue
                    slot = base + index
                    count = counts[slot]
                    hits = count & _COUNT_MASK
                    step = step.replace(3, step.w + hits)
                    if step.w < (count >> shift) & _COUNT_MASK:
                        counts[slot] = (hits | step.w << shift) & _WORD_MASK
                        following.append(step)
            frontier = following
            time += 1
        raise RuntimeError("the far corner cannot be reached with the allowed hits")


def parse_rules(lines: Iterable[str]) -> list[Rule]:
    """Read one rule per non-blank line."""
    return [parse_rule(line) for line in lines if line.strip()]


def parse_size(text: str) -> Point:
    """Read ``width[,height[,depth[,anakata]]]``; missing values keep their defaults."""
    values = list(DEFAULT_SIZE)
    pos = 0
    for position in range(len(values)):
        if position:
            separator = _SEPARATOR.match(text, pos)
            if separator is None:
                break
            pos = separator.end()
        number = _NUMBER.match(text, pos)
        if number is None:
            raise ValueError(f"expected a number in {text!r}")
        values[position] = int(number.group(1))
        pos = number.end()
    if text[pos:].strip():
        raise ValueError(f"unexpected trailing text in {text!r}")
    return Point(*values)


def main(argv: Optional[list[str]] = None) -> int:
    """Solve the puzzle for the rules file and optional size given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_USAGE)
        return 1
    path = args[0]
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        print(f"Cannot open {path}", file=sys.stderr)
        return 2
    with handle:
        try:
            rules = parse_rules(handle)
        except ValueError:
            print(f"Error reading {path}", file=sys.stderr)
            return 3
    try:
        size = parse_size(args[1]) if len(args) > 1 else DEFAULT_SIZE
        solution = Solution(rules, Range.from_min_and_size(DEFAULT_LOW, size))
    except ValueError as error:
        print(f"Invalid size: {error}", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        answers = (solution.part1(), solution.part2(), solution.part3())
    except RuntimeError as error:
        print(f"No route found: {error}", file=sys.stderr)
        return 4
    for answer in answers:
        print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())