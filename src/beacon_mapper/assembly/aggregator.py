"""Summaries over the fully assembled beacon map."""

from __future__ import annotations

from itertools import combinations
from typing import FrozenSet, Iterable, Sequence

from beacon_mapper.geometry import Point
from beacon_mapper.scanner import KnownScanner


def distinct_beacons(known: Iterable[KnownScanner]) -> FrozenSet[Point]:
    """Union of every placed scanner's global beacons."""
    beacons: set[Point] = set()
    for scanner in known:
        beacons.update(scanner.beacons)
    return frozenset(beacons)


def count_distinct_beacons(known: Iterable[KnownScanner]) -> int:
    return len(distinct_beacons(known))


def max_scanner_distance(known: Sequence[KnownScanner]) -> int:
    """Largest Manhattan distance between the positions of two scanners.

    A lone scanner has no partner and yields 0.
    """
    if not known:
        raise ValueError("No scanners to measure")
    return max(
        (first.offset.manhattan(second.offset) for first, second in combinations(known, 2)),
        default=0,
    )
