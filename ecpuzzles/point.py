"""Immutable integer points with a fixed number of coordinates."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator

_NUMBER = re.compile(r"\s*([+-]?\d+)")
_SEPARATOR = re.compile(r"\s*(\S)")


class Point:
    """An immutable point of one or more integer coordinates."""

    __slots__ = ("_values",)

    def __init__(self, *values: int) -> None:
        if not values:
            raise ValueError("a point needs at least one coordinate")
        self._values = tuple(int(value) for value in values)

    @classmethod
    def one(cls, dims: int) -> Point:
        """The point with every one of ``dims`` coordinates set to 1."""
        return cls(*([1] * dims))

    @property
    def dims(self) -> int:
        return len(self._values)

    @property
    def x(self) -> int:
        return self._values[0]

    @property
    def y(self) -> int:
        return self._values[1]

    @property
    def z(self) -> int:
        return self._values[2]

    @property
    def w(self) -> int:
        return self._values[3]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def replace(self, index: int, value: int) -> Point:
        """A copy of this point with one coordinate changed."""
        values = list(self._values)
        values[index] = value
        return Point(*values)

    def project(self, dims: int) -> Point:
        """The point made of the first ``dims`` coordinates."""
        if not 0 < dims <= len(self._values):
            raise ValueError(f"cannot project {len(self._values)} dimensions to {dims}")
        return Point(*self._values[:dims])

    def _paired(self, other: Point) -> zip:
        if len(other) != len(self):
            raise ValueError("points have different dimensions")
        return zip(self._values, other._values)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(*(a + b for a, b in self._paired(other)))

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(*(a - b for a, b in self._paired(other)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Point{self._values!r}" if len(self._values) > 1 else f"Point({self._values[0]})"

    def __str__(self) -> str:
        return ",".join(str(value) for value in self._values)


def dot(left: Point, right: Point) -> int:
    """Dot product of two points of equal dimension."""
    if len(left) != len(right):
        raise ValueError("points have different dimensions")
    return sum(a * b for a, b in zip(left, right))


def lcm(point: Point) -> int:
    """Least common multiple of all coordinates."""
    return math.lcm(*point)


def parse_point(text: str, dims: int) -> Point:
    """Read ``dims`` integers separated by single characters, such as ``1,2,3``."""
    if dims <= 0:
        raise ValueError("a point needs at least one coordinate")
    values = []
    pos = 0
    for position in range(dims):
        if position:
            separator = _SEPARATOR.match(text, pos)
            if separator is None:
                raise ValueError(f"expected a separator in {text!r}")
            pos = separator.end()
        number = _NUMBER.match(text, pos)
        if number is None:
            raise ValueError(f"expected a number in {text!r}")
        values.append(int(number.group(1)))
        pos = number.end()
    if text[pos:].strip():
        raise ValueError(f"unexpected trailing text in {text!r}")
    return Point(*values)