"""Single-axis shift search used to cascade a 3-D alignment."""

from __future__ import annotations

from typing import Optional

import numpy as np

MIN_OVERLAP = 12
SHIFT_BOUND = 10_000

AXIS_X = 0
AXIS_Y = 1
AXIS_Z = 2


def find_axis_shift(
    source_points: np.ndarray,
    target_points: np.ndarray,
    axis: int,
    min_overlap: int = MIN_OVERLAP,
    shift_bound: int = SHIFT_BOUND,
) -> Optional[int]:
    """
    Find the smallest shift that lines up one coordinate of two point sets.

    For a shift ``n`` the match count is the number of source points whose
    ``axis`` coordinate plus ``n`` is one of the target's distinct values on
    that axis. A shift is accepted when the count reaches ``min_overlap``
    and does not equal the number of distinct target values; the latter
    rejects the trivial match on an axis with very few distinct values.

    Args:
        source_points: (N, 3) integer array, shifted candidate.
        target_points: (M, 3) integer array, fixed reference.
        axis: Coordinate to compare (0, 1 or 2).
        min_overlap: Minimum number of coinciding coordinates.
        shift_bound: Shifts are searched in ``[-shift_bound, shift_bound]``.

    Returns:
        The first accepted shift in ascending order, or None.
    """
    if len(source_points) == 0 or len(target_points) == 0:
        return None

    source = source_points[:, axis]
    target = np.unique(target_points[:, axis])

    # Each source value meets a distinct target value at most once, so the
    # count for shift n is the multiplicity of n among pairwise differences.
    differences = (target[np.newaxis, :] - source[:, np.newaxis]).ravel()
    shifts, counts = np.unique(differences, return_counts=True)

    accepted = (
        (shifts >= -shift_bound)
        & (shifts <= shift_bound)
        & (counts >= min_overlap)
        & (counts != len(target))
    )
    hits = np.flatnonzero(accepted)
    if hits.size == 0:
        return None
    return int(shifts[hits[0]])
