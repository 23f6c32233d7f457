"""Rules that decide which points of a four-dimensional space hold debris."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .point import Point, dot

_WORD = re.compile(r"\s*(\S+)")
_NUMBER = re.compile(r"\s*([+-]?\d+)")
_CHARACTER = re.compile(r"\s*(\S)")


class _Scanner:
    """Reads whitespace-separated words, numbers and single characters in turn."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected {what} at position {self._pos} in {self._text!r}")
        self._pos = match.end()
        return match.group(1)

    def word(self) -> str:
        return self._take(_WORD, "a word")

    def integer(self) -> int:
        return int(self._take(_NUMBER, "a number"))

    def character(self) -> str:
        return self._take(_CHARACTER, "a character")

    def point(self, dims: int) -> Point:
        values = [self.integer()]
        for _ in range(dims - 1):
            self.character()
            values.append(self.integer())
        return Point(*values)


@dataclass(frozen=True)
class Rule:
    """Points whose weighted sum leaves ``remainder`` modulo ``divisor`` are debris."""

    factor: Point
    divisor: int
    remainder: int
    velocity: Point

    def __post_init__(self) -> None:
        if len(self.factor) != 4 or len(self.velocity) != 4:
            raise ValueError("a rule needs four-dimensional factor and velocity")
        if self.divisor <= 0:
            raise ValueError(f"divisor must be positive, not {self.divisor}")

    def is_debris(self, point: Point) -> bool:
        """Whether ``point`` holds debris under this rule."""
        return dot(point, self.factor) % self.divisor == self.remainder


def parse_rule(line: str) -> Rule:
    """Read a rule such as
    ``RULE 1: 1x+2y+3z+4a DIVIDE 5 HAS REMAINDER 0 | DEBRIS VELOCITY (0, -1, 0, 1)``.
    """
    scanner = _Scanner(line)
    scanner.word()
    scanner.word()
    factor = scanner.point(4)
    scanner.word()
    scanner.word()
    divisor = scanner.integer()
    scanner.word()
    scanner.word()
    remainder = scanner.integer()
    scanner.word()
    scanner.word()
    scanner.word()
    scanner.character()
    velocity = scanner.point(4)
    return Rule(factor, divisor, remainder, velocity)