"""Axis-aligned orientations and rigid transforms over integer points."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import List, Tuple

import numpy as np

from beacon_mapper.geometry.points import ORIGIN, Point

# Output axis i takes input axis PERMUTATIONS[k][i]; order is fixed.
PERMUTATIONS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 2, 1),
    (1, 0, 2),
    (2, 0, 1),
    (1, 2, 0),
    (2, 1, 0),
)


@dataclass(frozen=True, slots=True)
class Orientation:
    """Signed axis permutation.

    Signs multiply the input axes first, then the axes are permuted, so
    ``apply((x, y, z))`` with ``permutation=(2, 0, 1)`` yields
    ``(sz * z, sx * x, sy * y)``.
    """

    signs: Tuple[int, int, int]
    permutation: Tuple[int, int, int]

    def apply(self, point: Point) -> Point:
        scaled = (point.x * self.signs[0], point.y * self.signs[1], point.z * self.signs[2])
        return Point(scaled[self.permutation[0]], scaled[self.permutation[1]], scaled[self.permutation[2]])

    def apply_array(self, points: np.ndarray) -> np.ndarray:
        """Rotate an (N, 3) array of points about the origin."""
        return (points * np.asarray(self.signs, dtype=points.dtype))[:, list(self.permutation)]

    @property
    def matrix(self) -> np.ndarray:
        matrix = np.zeros((3, 3), dtype=np.int64)
        for row, column in enumerate(self.permutation):
            matrix[row, column] = self.signs[column]
        return matrix

    @property
    def determinant(self) -> int:
        return int(round(np.linalg.det(self.matrix)))

    @property
    def is_proper(self) -> bool:
        """True for rotations, False for reflections."""
        return self.determinant == 1

    def inverse(self) -> "Orientation":
        return Orientation.from_matrix(self.matrix.T)

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "Orientation":
        matrix = np.asarray(matrix)
        if matrix.shape != (3, 3):
            raise ValueError(f"Orientation matrix must be 3x3, got shape {matrix.shape}")
        signs = [0, 0, 0]
        permutation = []
        for row in matrix:
            nonzero = np.flatnonzero(row)
            if len(nonzero) != 1 or abs(int(row[nonzero[0]])) != 1:
                raise ValueError(f"Not a signed permutation matrix:\n{matrix}")
            column = int(nonzero[0])
            permutation.append(column)
            signs[column] = int(row[column])
        if sorted(permutation) != [0, 1, 2]:
            raise ValueError(f"Not a signed permutation matrix:\n{matrix}")
        return cls(signs=tuple(signs), permutation=tuple(permutation))


def _build_orientations() -> Tuple[Orientation, ...]:
    table: List[Orientation] = []
    for signs in product((1, -1), repeat=3):
        for permutation in PERMUTATIONS:
            table.append(Orientation(signs=signs, permutation=permutation))
    return tuple(table)


ORIENTATIONS: Tuple[Orientation, ...] = _build_orientations()
IDENTITY = ORIENTATIONS[0]


def orientations(proper_only: bool = False) -> Tuple[Orientation, ...]:
    """Candidate orientations to try when aligning two scanners.

    The full table holds all 48 signed permutations; ``proper_only``
    keeps the 24 with determinant +1.
    """
    if proper_only:
        return tuple(orientation for orientation in ORIENTATIONS if orientation.is_proper)
    return ORIENTATIONS


@dataclass(frozen=True, slots=True)
class Transform:
    """Rotation about the origin followed by a translation."""

    orientation: Orientation
    translation: Point

    def apply(self, point: Point) -> Point:
        return self.orientation.apply(point) + self.translation

    def apply_array(self, points: np.ndarray) -> np.ndarray:
        offset = np.asarray(self.translation.as_tuple(), dtype=points.dtype)
        return self.orientation.apply_array(points) + offset


IDENTITY_TRANSFORM = Transform(orientation=IDENTITY, translation=ORIGIN)
