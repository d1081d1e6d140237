"""Integer 3-D point type and vector helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable integer position in some scanner's frame."""

    x: int
    y: int
    z: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def manhattan(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)


ORIGIN = Point(0, 0, 0)


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """Stack points into an (N, 3) int64 array."""
    rows = [point.as_tuple() for point in points]
    if not rows:
        return np.empty((0, 3), dtype=np.int64)
    return np.array(rows, dtype=np.int64)


def array_to_points(array: np.ndarray) -> frozenset[Point]:
    """Convert an (N, 3) integer array back into a set of points."""
    return frozenset(Point(int(x), int(y), int(z)) for x, y, z in array.tolist())
