"""Orientation search that aligns a scanner with an already placed one."""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Union

import numpy as np
from loguru import logger

from beacon_mapper.alignment.axis_search import (
    AXIS_X,
    AXIS_Y,
    AXIS_Z,
    MIN_OVERLAP,
    SHIFT_BOUND,
    find_axis_shift,
)
from beacon_mapper.geometry import Orientation, Point, Transform, array_to_points, orientations
from beacon_mapper.scanner import KnownScanner, Scanner


@dataclass(slots=True)
class AlignmentResult:
    """Placement of a candidate scanner inside a target scanner's frame."""

    orientation: Orientation
    translation: Point  # candidate's position in the target frame
    beacons: FrozenSet[Point]  # candidate beacons in the target frame

    @property
    def transform(self) -> Transform:
        return Transform(orientation=self.orientation, translation=self.translation)


class ScannerAligner:
    """Finds the rigid transform between two overlapping scanners.

    Every candidate orientation is tried independently; with more than one
    worker they race on a thread pool and the first success is kept.
    """

    def __init__(
        self,
        min_overlap: int = MIN_OVERLAP,
        shift_bound: int = SHIFT_BOUND,
        max_workers: int = 8,
        proper_rotations_only: bool = False,
    ) -> None:
        """
        Args:
            min_overlap: Beacons two scanners must share to be aligned
            shift_bound: Largest absolute per-axis translation searched
            max_workers: Thread pool size; 1 searches orientations in order
            proper_rotations_only: Skip the 24 reflections
        """
        self._min_overlap = min_overlap
        self._shift_bound = shift_bound
        self._orientations = orientations(proper_only=proper_rotations_only)
        self._executor: Optional[ThreadPoolExecutor] = None
        if max_workers > 1:
            self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="orientation")

    @property
    def candidate_orientations(self) -> int:
        return len(self._orientations)

    def align(
        self,
        candidate: Scanner,
        target: Union[Scanner, KnownScanner],
    ) -> Optional[AlignmentResult]:
        """
        Express ``candidate`` in ``target``'s frame.

        Returns:
            AlignmentResult for the first orientation whose cascaded x, y, z
            shift searches all succeed, or None when the scanners do not
            overlap.
        """
        start_time = time.perf_counter()
        source = candidate.as_array()
        reference = target.as_array()

        if self._executor is None:
            result = self._search_sequential(source, reference)
        else:
            result = self._search_parallel(source, reference)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        if result is None:
            logger.debug(f"Scanner {candidate.index} does not overlap scanner {target.index} ({elapsed_ms:.1f}ms)")
        else:
            logger.debug(
                f"Scanner {candidate.index} aligned to scanner {target.index} in {elapsed_ms:.1f}ms: "
                f"signs={result.orientation.signs}, permutation={result.orientation.permutation}, "
                f"translation={result.translation.as_tuple()}"
            )
        return result

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> "ScannerAligner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _search_sequential(self, source: np.ndarray, reference: np.ndarray) -> Optional[AlignmentResult]:
        for orientation in self._orientations:
            result = self._try_orientation(orientation, source, reference)
            if result is not None:
                return result
        return None

    def _search_parallel(self, source: np.ndarray, reference: np.ndarray) -> Optional[AlignmentResult]:
        found = threading.Event()
        futures: List[Future] = [
            self._executor.submit(self._try_orientation, orientation, source, reference, found)
            for orientation in self._orientations
        ]
        try:
            for future in as_completed(futures):
                result = future.result()
                if result is not None:
                    found.set()
                    return result
        finally:
            for future in futures:
                future.cancel()
        return None

    def _try_orientation(
        self,
        orientation: Orientation,
        source: np.ndarray,
        reference: np.ndarray,
        found: Optional[threading.Event] = None,
    ) -> Optional[AlignmentResult]:
        if found is not None and found.is_set():
            return None

        rotated = orientation.apply_array(source)

        dx = self._shift(rotated, reference, AXIS_X)
        if dx is None:
            return None
        rotated = rotated + np.array([dx, 0, 0], dtype=rotated.dtype)

        dy = self._shift(rotated, reference, AXIS_Y)
        if dy is None:
            return None
        rotated = rotated + np.array([0, dy, 0], dtype=rotated.dtype)

        dz = self._shift(rotated, reference, AXIS_Z)
        if dz is None:
            return None
        rotated = rotated + np.array([0, 0, dz], dtype=rotated.dtype)

        return AlignmentResult(
            orientation=orientation,
            translation=Point(dx, dy, dz),
            beacons=array_to_points(rotated),
        )

    def _shift(self, source: np.ndarray, reference: np.ndarray, axis: int) -> Optional[int]:
        return find_axis_shift(
            source,
            reference,
            axis,
            min_overlap=self._min_overlap,
            shift_bound=self._shift_bound,
        )
