"""Inclusive integer boxes spanned by two points."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .point import Point, parse_point


@dataclass(frozen=True)
class Range:
    """An inclusive box from ``low`` to ``high`` in every dimension."""

    low: Point
    high: Point

    def __post_init__(self) -> None:
        if len(self.low) != len(self.high):
            raise ValueError("range corners have different dimensions")

    @classmethod
    def from_min_and_size(cls, low: Point, size: Point) -> Range:
        """The range starting at ``low`` with ``size`` cells along each axis."""
        return cls(low, low + size - Point.one(len(low)))

    @property
    def dims(self) -> int:
        return len(self.low)

    def project(self, dims: int) -> Range:
        """The range over the first ``dims`` axes."""
        return Range(self.low.project(dims), self.high.project(dims))

    def extent(self, index: int) -> int:
        """Number of cells along one axis."""
        return self.high[index] - self.low[index] + 1

    def size(self) -> Point:
        return Point(*(high - low + 1 for low, high in zip(self.low, self.high)))

    def length(self) -> int:
        """Total number of cells."""
        return math.prod(self.size())

    def contains(self, point: Point) -> bool:
        if len(point) != self.dims:
            raise ValueError("point and range have different dimensions")
        return all(low <= p <= high for low, p, high in zip(self.low, point, self.high))

    def index(self, point: Point) -> int:
        """Row-major offset of ``point``, the last axis varying fastest."""
        offset = 0
        for low, extent, p in zip(self.low, self.size(), point):
            offset = offset * extent + p - low
        return offset

    def try_index(self, point: Point) -> Optional[int]:
        """The offset of ``point``, or None if it lies outside."""
        return self.index(point) if self.contains(point) else None

    def wrap(self, point: Point) -> Point:
        """Bring ``point`` into the range by wrapping each axis around."""
        return Point(
            *((p - low) % extent + low for p, low, extent in zip(point, self.low, self.size()))
        )

    def __iter__(self) -> Iterator[Point]:
        axes = (range(low, high + 1) for low, high in zip(self.low, self.high))
        for values in itertools.product(*axes):
            yield Point(*values)

    def __str__(self) -> str:
        return f"{self.low}~{self.high}"


def parse_range(text: str, dims: int) -> Range:
    """Read a range written as ``low~high``."""
    low_text, separator, high_text = text.partition("~")
    if not separator:
        raise ValueError(f"expected '~' in {text!r}")
    return Range(parse_point(low_text, dims), parse_point(high_text, dims))