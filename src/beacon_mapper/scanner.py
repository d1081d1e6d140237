"""Scanner records before and after placement in the global frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

import numpy as np

from beacon_mapper.geometry import IDENTITY_TRANSFORM, ORIGIN, Point, Transform, points_to_array


@dataclass(frozen=True, slots=True)
class Scanner:
    """Beacons reported by one scanner in its own local frame."""

    index: int
    beacons: FrozenSet[Point]

    @classmethod
    def from_coordinates(cls, index: int, coordinates: Iterable[Iterable[int]]) -> "Scanner":
        return cls(index=index, beacons=frozenset(Point(*(int(value) for value in row)) for row in coordinates))

    def as_array(self) -> np.ndarray:
        return points_to_array(self.beacons)

    def __len__(self) -> int:
        return len(self.beacons)


@dataclass(frozen=True, slots=True)
class KnownScanner:
    """A scanner whose beacons are expressed in the anchor's frame.

    ``offset`` is the scanner's own position relative to the anchor and
    ``transform`` maps its local readings into the global frame.
    """

    index: int
    beacons: FrozenSet[Point]
    offset: Point = ORIGIN
    transform: Transform = field(default=IDENTITY_TRANSFORM)

    @classmethod
    def anchor(cls, scanner: Scanner) -> "KnownScanner":
        return cls(index=scanner.index, beacons=scanner.beacons)

    def as_array(self) -> np.ndarray:
        return points_to_array(self.beacons)

    def __len__(self) -> int:
        return len(self.beacons)
