"""pytest configuration and fixtures for the beacon_mapper test suite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np
import pytest

from beacon_mapper.geometry import Orientation, Point, array_to_points, orientations, points_to_array
from beacon_mapper.scanner import Scanner

# Scanner positions of the five-scanner worked example, relative to scanner 0.
FIVE_SCANNER_POSITIONS: Dict[int, Point] = {
    0: Point(0, 0, 0),
    1: Point(68, -1246, -43),
    2: Point(1105, -1205, 1229),
    3: Point(-92, -2380, -20),
    4: Point(-20, -1133, 1061),
}


@dataclass(slots=True)
class Scenario:
    scanners: List[Scanner]
    positions: Dict[int, Point]
    orientations: Dict[int, Orientation]
    beacons: frozenset


def random_beacons(seed: int, count: int, low: int = -900, high: int = 900) -> np.ndarray:
    """Distinct integer beacons in the global frame."""
    rng = np.random.default_rng(seed)
    pool = np.unique(rng.integers(low, high + 1, size=(count * 4, 3)), axis=0)
    rng.shuffle(pool)
    return pool[:count].astype(np.int64)


def scanner_view(index: int, global_points: np.ndarray, position: Point, orientation: Orientation) -> Scanner:
    """Readings of a scanner at ``position`` whose frame maps to global through ``orientation``."""
    relative = global_points - np.asarray(position.as_tuple(), dtype=np.int64)
    local = orientation.inverse().apply_array(relative)
    return Scanner(index=index, beacons=array_to_points(local))


def render_report(scanners: Sequence[Scanner]) -> str:
    blocks = []
    for scanner in scanners:
        lines = [f"--- scanner {scanner.index} ---"]
        lines.extend(f"{x},{y},{z}" for x, y, z in points_to_array(sorted(scanner.beacons, key=Point.as_tuple)).tolist())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


@pytest.fixture
def five_scanner_scenario() -> Scenario:
    """Five scanners laid out like the worked example: 79 beacons, widest pair 3621 apart.

    Overlaps (12 shared beacons each): 0-1, 1-3, 1-4, 4-2.
    """
    beacons = random_beacons(seed=19, count=79)
    groups = {
        "01": beacons[0:12],
        "13": beacons[12:24],
        "14": beacons[24:36],
        "24": beacons[36:48],
        "0": beacons[48:61],
        "2": beacons[61:67],
        "3": beacons[67:75],
        "4": beacons[75:79],
    }
    visible = {
        0: ["01", "0"],
        1: ["01", "13", "14"],
        2: ["24", "2"],
        3: ["13", "3"],
        4: ["14", "24", "4"],
    }
    rotations = orientations(proper_only=True)
    frames = {0: rotations[0], 1: rotations[7], 2: rotations[13], 3: rotations[18], 4: rotations[22]}

    scanners = [
        scanner_view(
            index,
            np.vstack([groups[name] for name in visible[index]]),
            FIVE_SCANNER_POSITIONS[index],
            frames[index],
        )
        for index in range(5)
    ]
    return Scenario(
        scanners=scanners,
        positions=dict(FIVE_SCANNER_POSITIONS),
        orientations=frames,
        beacons=array_to_points(beacons),
    )


@pytest.fixture
def two_scanner_scenario() -> Scenario:
    """Scanner 1 is scanner 0 turned 180 degrees about z, sharing exactly 12 beacons."""
    beacons = random_beacons(seed=7, count=28)
    half_turn = Orientation(signs=(-1, -1, 1), permutation=(0, 1, 2))
    position = Point(1180, -340, 75)
    scanners = [
        scanner_view(0, beacons[0:20], Point(0, 0, 0), orientations()[0]),
        scanner_view(1, beacons[8:28], position, half_turn),
    ]
    return Scenario(
        scanners=scanners,
        positions={0: Point(0, 0, 0), 1: position},
        orientations={0: orientations()[0], 1: half_turn},
        beacons=array_to_points(beacons),
    )
